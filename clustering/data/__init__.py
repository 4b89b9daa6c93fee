from .synthetic import block_slices, make_separated_blocks, make_uniform

__all__ = ["block_slices", "make_separated_blocks", "make_uniform"]
