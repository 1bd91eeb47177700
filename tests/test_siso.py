import pytest

from signalsim.siso import (
    Component,
    ParallelComposite,
    ScalingComponent,
    SeriesComposite,
    SISO,
)


@pytest.fixture
def leaves():
    return {
        "c1": ScalingComponent(2.0),
        "c2": ScalingComponent(3.0),
        "c3": ScalingComponent(0.5),
        "c4": ScalingComponent(1.5),
    }


def test_series_composite(leaves):
    series = SeriesComposite()
    series.add(leaves["c1"])
    series.add(leaves["c2"])
    series.add(leaves["c3"])
    assert series.simulate(5.0) == pytest.approx(15.0)
    assert len(series) == 3


def test_parallel_composite(leaves):
    parallel = ParallelComposite()
    parallel.add(leaves["c1"])
    parallel.add(leaves["c2"])
    parallel.add(leaves["c4"])
    assert parallel.simulate(5.0) == pytest.approx(32.5)


def test_nested_composite(leaves):
    parallel = ParallelComposite()
    parallel.add(leaves["c1"])
    parallel.add(leaves["c2"])
    parallel.add(leaves["c4"])
    nested = SeriesComposite()
    nested.add(leaves["c1"])
    nested.add(parallel)
    assert nested.simulate(5.0) == pytest.approx(65.0)


def test_remove_component(leaves):
    parallel = ParallelComposite()
    parallel.add(leaves["c1"])
    parallel.add(leaves["c2"])
    parallel.add(leaves["c4"])
    parallel.remove(leaves["c2"])
    assert parallel.simulate(5.0) == pytest.approx(17.5)
    assert len(parallel) == 2


@pytest.mark.parametrize("composite_type", [SeriesComposite, ParallelComposite])
def test_add_none_is_ignored(composite_type):
    composite = composite_type()
    composite.add(None)
    assert len(composite) == 0


@pytest.mark.parametrize("composite_type", [SeriesComposite, ParallelComposite])
def test_remove_missing_leaves_children(composite_type, leaves):
    composite = composite_type()
    composite.add(leaves["c1"])
    composite.remove(leaves["c2"])
    composite.remove(None)
    assert len(composite) == 1


def test_remove_only_first_occurrence(leaves):
    parallel = ParallelComposite()
    parallel.add(leaves["c1"])
    parallel.add(leaves["c1"])
    parallel.remove(leaves["c1"])
    assert len(parallel) == 1
    assert parallel.simulate(5.0) == pytest.approx(10.0)


def test_empty_series_passes_input_through():
    assert SeriesComposite().simulate(7.25) == 7.25


def test_empty_parallel_outputs_zero():
    assert ParallelComposite().simulate(7.25) == 0.0


class _Offset(SISO):
    def __init__(self, offset):
        self.offset = offset

    def simulate(self, u):
        return u + self.offset


def test_scaling_component_delegates_to_wrapped_block():
    leaf = ScalingComponent(10.0, _Offset(1.0))
    assert leaf.simulate(4.0) == 5.0


def test_scaling_component_default_coefficient_is_identity():
    assert ScalingComponent().simulate(3.5) == 3.5


def test_leaf_ignores_children(leaves):
    leaf = leaves["c1"]
    leaf.add(leaves["c2"])
    leaf.remove(leaves["c2"])
    assert leaf.simulate(5.0) == pytest.approx(10.0)


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component()