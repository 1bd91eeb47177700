"""Single-input single-output blocks and composites that chain them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SISO(ABC):
    """A block with one input and one output, simulated one step at a time."""

    @abstractmethod
    def simulate(self, u: float) -> float:
        """Advance the block by one step for input ``u`` and return its output."""


class Component(SISO):
    """A node of a composite tree; leaves ignore ``add`` and ``remove``."""

    def add(self, component: Component | None) -> None:
        """Attach a child component. Leaves have no children."""

    def remove(self, component: Component | None) -> None:
        """Detach a child component. Leaves have no children."""


class _Composite(Component):
    def __init__(self) -> None:
        self._children: list[Component] = []

    def add(self, component: Component | None) -> None:
        """Append ``component``; ``None`` is ignored."""
        if component is not None:
            self._children.append(component)

    def remove(self, component: Component | None) -> None:
        """Remove the first occurrence of ``component``, if present."""
        if component is None:
            return
        for position, child in enumerate(self._children):
            if child is component:
                del self._children[position]
                return

    def __len__(self) -> int:
        return len(self._children)


class SeriesComposite(_Composite):
    """Children in series: each one's output feeds the next one's input."""

    def simulate(self, u: float) -> float:
        result = u
        for child in self._children:
            result = child.simulate(result)
        return result

    def add(self, component: Component | None) -> None:
        super().add(component)

    def remove(self, component: Component | None) -> None:
        super().remove(component)

    def __len__(self) -> int:
        return super().__len__()


class ParallelComposite(_Composite):
    """Children in parallel: all get the same input and their outputs are summed."""

    def simulate(self, u: float) -> float:
        return sum((child.simulate(u) for child in self._children), 0.0)

    def add(self, component: Component | None) -> None:
        super().add(component)

    def remove(self, component: Component | None) -> None:
        super().remove(component)

    def __len__(self) -> int:
        return super().__len__()


class ScalingComponent(Component):
    """A leaf that wraps a SISO block, or scales its input when it wraps none."""

    def __init__(self, coefficient: float = 1.0, obj: SISO | None = None) -> None:
        self.coefficient = coefficient
        self.obj = obj

    def simulate(self, u: float) -> float:
        if self.obj is not None:
            return self.obj.simulate(u)
        return u * self.coefficient