from .blocks import BLOCK_RENDERERS, render_block, render_blocks

__all__ = ["BLOCK_RENDERERS", "render_block", "render_blocks"]
