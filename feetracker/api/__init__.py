"""HTTP API over the fee tracker."""
