"""Abstract base class for generation layers.

Each layer in the pipeline implements the GenerationLayer interface and
transforms the GenerationContext in some way, carving cells into its grid.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import GenerationContext


class GenerationLayer(ABC):
    """Abstract base class for maze generation layers.

    Layers are applied sequentially by the MazeGenerationEngine. Each layer
    receives a GenerationContext and modifies it in place.

    Subclasses must implement the apply() method to perform their specific
    generation logic.
    """

    @abstractmethod
    def apply(self, ctx: GenerationContext) -> None:
        """Apply this layer's generation logic to the context.

        This method should modify the context in place. It may:
        - Carve cells (ctx.grid)
        - Advance the grid's lifecycle stage
        - Use ctx.rng for random decisions

        Args:
            ctx: The generation context to modify.
        """
        raise NotImplementedError
