from .picker_coordinator import PickerCoordinator

__all__ = ["PickerCoordinator"]
