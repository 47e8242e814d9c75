"""Base class for resource attributes that support autoscaling.

`BaseScalableAttribute` is a thin wrapper around one `ScalableTarget`. Its
scaling operations are underscore-prefixed so that per-service subclasses
choose which of them to expose, and under which name and signature.

Typical uses:

- Hide the generic `PredefinedMetric` enum behind a service-specific call.
- Leave out operations a service does not support (DynamoDB tables have no
  step scaling, so `ScalableTableAttribute` does not expose it).
"""

from typing import Any, Callable, Optional

from pydantic import BaseModel

from .construct import Construct
from .scalable_target import ScalableTarget, ScalingCapability, ServiceNamespace

DEFAULT_MIN_CAPACITY = 1


class BaseScalableAttributeProps(BaseModel):
    service_namespace: ServiceNamespace
    resource_id: str
    dimension: str
    role: str
    min_capacity: Optional[int] = None
    max_capacity: int


class BaseScalableAttribute(Construct):
    """Represent an attribute for which autoscaling can be configured."""

    # Callable building the owned target; swapped for a recording double in tests.
    target_factory: Callable[..., ScalingCapability] = ScalableTarget

    def __init__(self, scope: Optional[Construct], id: str, props: Any) -> None:  # pylint: disable=redefined-builtin
        super().__init__(scope, id)
        if isinstance(props, dict):
            props = BaseScalableAttributeProps.model_validate(props)
        self.props = props

        min_capacity = props.min_capacity if props.min_capacity is not None else DEFAULT_MIN_CAPACITY
        self._target = self.target_factory(
            self,
            "Target",
            {
                "service_namespace": props.service_namespace,
                "scalable_dimension": props.dimension,
                "resource_id": props.resource_id,
                "role": props.role,
                "min_capacity": min_capacity,
                "max_capacity": props.max_capacity,
            },
        )

    def _scale_on_schedule(self, id: str, schedule: Any) -> None:  # pylint: disable=redefined-builtin
        """Scale out or in based on time."""
        self._target.scale_on_schedule(id, schedule)

    def _scale_on_metric(self, id: str, props: Any) -> None:  # pylint: disable=redefined-builtin
        """Scale out or in based on a metric value."""
        self._target.scale_on_metric(id, props)

    def _scale_to_track_metric(self, id: str, props: Any) -> None:  # pylint: disable=redefined-builtin
        """Scale out or in in order to keep a metric around a target value."""
        self._target.scale_to_track_metric(id, props)
