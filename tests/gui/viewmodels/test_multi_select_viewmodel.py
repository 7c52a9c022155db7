import pytest

from fastpicker.domain.models import MediaItem
from fastpicker.gui.viewmodels.multi_select_viewmodel import MultiSelectViewModel
from fastpicker.gui.viewmodels.selection_viewmodel import SelectionViewModel
from fastpicker.gui.viewmodels.transition import TransitionState


@pytest.fixture
def selection(library):
    vm = SelectionViewModel(library, 3)
    vm.toggle(MediaItem("a"))
    vm.toggle(MediaItem("b"))
    return vm


def test_initial_state_follows_prior_selection(selection):
    assert MultiSelectViewModel(selection).state is TransitionState.INACTIVE
    assert MultiSelectViewModel(selection, initially_active=True).state is TransitionState.ACTIVE


def test_activate_is_forward_transition(selection):
    mode = MultiSelectViewModel(selection)

    mode.activate()
    assert mode.state is TransitionState.ACTIVATING
    assert mode.is_active

    mode.transition.finish()
    assert mode.state is TransitionState.ACTIVE


def test_selection_survives_until_deactivation_completes(selection):
    mode = MultiSelectViewModel(selection, initially_active=True)

    mode.deactivate()

    assert mode.state is TransitionState.DEACTIVATING
    assert not mode.is_active
    assert selection.count == 2

    mode.transition.finish()

    assert mode.state is TransitionState.INACTIVE
    assert selection.is_empty


def test_reactivating_mid_exit_keeps_selection(selection):
    mode = MultiSelectViewModel(selection, initially_active=True)

    mode.deactivate()
    mode.activate()
    mode.transition.finish()

    assert mode.state is TransitionState.ACTIVE
    assert selection.count == 2


def test_activation_completion_does_not_clear(selection):
    mode = MultiSelectViewModel(selection, duration_ms=0, reverse_duration_ms=0)

    mode.toggle()

    assert mode.state is TransitionState.ACTIVE
    assert selection.count == 2


def test_dispose_stops_listening(selection):
    mode = MultiSelectViewModel(selection, initially_active=True)
    mode.deactivate()

    mode.dispose()
    mode.transition.finish()

    assert selection.count == 2
