"""DynamoDB table capacity as a scalable attribute."""

from typing import Any, Optional

from .base_scalable_attribute import BaseScalableAttribute
from .scalable_target import BasicTargetTrackingScalingPolicyProps, PredefinedMetric

_UTILIZATION_METRICS = {
    "dynamodb:table:ReadCapacityUnits": PredefinedMetric.DYNAMODB_READ_CAPACITY_UTILIZATION,
    "dynamodb:table:WriteCapacityUnits": PredefinedMetric.DYNAMODB_WRITE_CAPACITY_UTILIZATION,
    "dynamodb:index:ReadCapacityUnits": PredefinedMetric.DYNAMODB_READ_CAPACITY_UTILIZATION,
    "dynamodb:index:WriteCapacityUnits": PredefinedMetric.DYNAMODB_WRITE_CAPACITY_UTILIZATION,
}


class ScalableTableAttribute(BaseScalableAttribute):
    """Read or write capacity of a table or global secondary index.

    Exposes schedule-based scaling and utilisation tracking. Step scaling is
    not supported for DynamoDB and is left unexposed.
    """

    def scale_on_schedule(self, id: str, schedule: Any) -> None:  # pylint: disable=redefined-builtin
        self._scale_on_schedule(id, schedule)

    def scale_on_utilization(
        self,
        target_utilization_percent: float,
        *,
        scale_in_cooldown_sec: Optional[int] = None,
        scale_out_cooldown_sec: Optional[int] = None,
        disable_scale_in: bool = False,
    ) -> None:
        """Keep consumed capacity around `target_utilization_percent` (10-90)."""
        if not 10 <= target_utilization_percent <= 90:
            raise ValueError(
                f"target_utilization_percent for DynamoDB scaling must be between 10 and 90 percent, "
                f"got: {target_utilization_percent}"
            )
        metric = _UTILIZATION_METRICS.get(self.props.dimension)
        if metric is None:
            raise ValueError(f"No utilization metric known for dimension '{self.props.dimension}'")
        self._scale_to_track_metric(
            "Tracking",
            BasicTargetTrackingScalingPolicyProps(
                target_value=target_utilization_percent,
                predefined_metric=metric,
                scale_in_cooldown_sec=scale_in_cooldown_sec,
                scale_out_cooldown_sec=scale_out_cooldown_sec,
                disable_scale_in=disable_scale_in,
            ),
        )
