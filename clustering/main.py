# main.py
import argparse
import logging
from os import cpu_count
from typing import Any, Callable, Dict, List, Sequence

import numpy as np

from clustering.core.base import KMeansBase
from clustering.core.distance import METRICS
from clustering.core.executor import ThreadPoolAdapter
from clustering.core.serial import KMeansSerial
from clustering.core.space import TerminationCriteria, numpy_random_source
from clustering.core.threaded import KMeansThreaded
from clustering.data.synthetic import make_uniform
from clustering.metrics.metrics import efficiency, speedup, throughput
from clustering.metrics.timers import Timer
from clustering.utils.logging import format_run_prefix, setup_logger


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Бенчмарк однопоточного и параллельного kmeans на равномерных данных."
    )
    parser.add_argument("--dim", type=int, default=20, help="Размерность элементов.")
    parser.add_argument("--batch-size", type=int, default=10003, help="Число элементов в батче.")
    parser.add_argument("--clusters", type=int, default=10, help="Число кластеров K.")
    parser.add_argument("--runs", type=int, default=10, help="Число замеряемых запусков.")
    parser.add_argument(
        "--metric",
        type=str,
        choices=sorted(METRICS) + ["all"],
        default="all",
        help="Метрика расстояния (all: прогнать все).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=cpu_count() or 1,
        help="Число потоков для параллельного движка.",
    )
    parser.add_argument("--epsilon", type=float, default=0.1, help="Порог смещения центров.")
    parser.add_argument("--max-iterations", type=int, default=10000, help="Предел итераций.")
    parser.add_argument("--seed", type=int, default=0, help="Seed данных и инициализации.")
    args = parser.parse_args(argv)
    if args.runs < 1:
        parser.error("--runs must be positive")
    return args


def bench_model(
    model_factory: Callable[[], KMeansBase],
    X: np.ndarray,
    K: int,
    runs: int,
    seed: int,
) -> Dict[str, Any]:
    """
    Несколько запусков fit с одним источником случайных чисел.

    :return: словарь со временами запусков и числом итераций
    """
    generator = numpy_random_source(seed)
    times: List[float] = []
    iters: List[int] = []
    ok = True

    for _ in range(runs):
        model = model_factory()
        centers = np.zeros((K, X.shape[1]), dtype=np.float64)
        assignment = np.zeros(X.shape[0], dtype=np.intp)
        with Timer() as t_fit:
            ok = model.fit(X, generator, centers, assignment) and ok
        times.append(t_fit.elapsed)
        iters.append(model.n_iters_actual)

    return {
        "ok": ok,
        "T_fit_avg": float(np.mean(times)),
        "T_fit_min": float(np.min(times)),
        "n_iters_avg": float(np.mean(iters)),
    }


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logger = setup_logger()

    rng = np.random.default_rng(args.seed)
    X = make_uniform(args.batch_size, args.dim, 1000.0, rng)
    criteria = TerminationCriteria(epsilon=args.epsilon, max_iterations=args.max_iterations)
    metric_names = sorted(METRICS) if args.metric == "all" else [args.metric]

    # Движки пишут остановку на INFO на каждый запуск, в бенчмарке это шум
    quiet = logger.getChild("bench")
    quiet.setLevel(logging.WARNING)

    ok = True
    with ThreadPoolAdapter(args.workers) as pool:
        for name in metric_names:
            metric = METRICS[name]
            prefix = format_run_prefix(
                {"N": args.batch_size, "D": args.dim, "K": args.clusters, "metric": name}
            )

            serial = bench_model(
                lambda: KMeansSerial(metric=metric, criteria=criteria, logger=quiet),
                X, args.clusters, args.runs, args.seed,
            )
            threaded = bench_model(
                lambda: KMeansThreaded(pool, metric=metric, criteria=criteria, logger=quiet),
                X, args.clusters, args.runs, args.seed,
            )
            ok = ok and serial["ok"] and threaded["ok"]

            s = speedup(serial["T_fit_avg"], threaded["T_fit_avg"])
            logger.info(
                f"{prefix} serial: {serial['T_fit_avg'] * 1000:.1f}ms per run "
                f"({serial['n_iters_avg']:.1f} iterations)"
            )
            logger.info(
                f"{prefix} threaded x{pool.n_workers}: {threaded['T_fit_avg'] * 1000:.1f}ms per run "
                f"({threaded['n_iters_avg']:.1f} iterations)"
            )
            logger.info(
                f"{prefix} speedup={s:.2f}, efficiency={efficiency(s, pool.n_workers):.2f}, "
                f"throughput={throughput(args.batch_size, args.clusters, args.dim, int(threaded['n_iters_avg']), threaded['T_fit_avg']):.3e} ops/s"
            )

    if not ok:
        logger.error("Some runs failed validation")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
