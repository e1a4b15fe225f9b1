"""Client side of the personal finance tracker."""
