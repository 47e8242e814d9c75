"""Scalable target: a resource capacity range plus its scaling registrations.

`ScalableTarget` keeps the scheduled actions and scaling policies registered
against it in memory. It does not talk to any cloud API; it exists so that
attribute facades have a concrete collaborator during development and tests.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Protocol, Set, Type, TypeVar

from pydantic import BaseModel, Field, model_validator

from .construct import Construct

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class ServiceNamespace(str, Enum):
    """Service that owns the scalable resource."""

    ECS = "ecs"
    ELASTIC_MAP_REDUCE = "elasticmapreduce"
    EC2 = "ec2"
    APPSTREAM = "appstream"
    DYNAMODB = "dynamodb"
    RDS = "rds"
    SAGEMAKER = "sagemaker"
    CUSTOM_RESOURCE = "custom-resource"


class AdjustmentType(str, Enum):
    CHANGE_IN_CAPACITY = "ChangeInCapacity"
    PERCENT_CHANGE_IN_CAPACITY = "PercentChangeInCapacity"
    EXACT_CAPACITY = "ExactCapacity"


class PredefinedMetric(str, Enum):
    DYNAMODB_READ_CAPACITY_UTILIZATION = "DynamoDBReadCapacityUtilization"
    DYNAMODB_WRITE_CAPACITY_UTILIZATION = "DynamoDBWriteCapacityUtilization"
    ALB_REQUEST_COUNT_PER_TARGET = "ALBRequestCountPerTarget"
    RDS_READER_AVERAGE_CPU_UTILIZATION = "RDSReaderAverageCPUUtilization"
    RDS_READER_AVERAGE_DATABASE_CONNECTIONS = "RDSReaderAverageDatabaseConnections"
    EC2_SPOT_FLEET_REQUEST_AVERAGE_CPU_UTILIZATION = "EC2SpotFleetRequestAverageCPUUtilization"
    EC2_SPOT_FLEET_REQUEST_AVERAGE_NETWORK_IN = "EC2SpotFleetRequestAverageNetworkIn"
    EC2_SPOT_FLEET_REQUEST_AVERAGE_NETWORK_OUT = "EC2SpotFleetRequestAverageNetworkOut"
    SAGEMAKER_VARIANT_INVOCATIONS_PER_INSTANCE = "SageMakerVariantInvocationsPerInstance"
    ECS_SERVICE_AVERAGE_CPU_UTILIZATION = "ECSServiceAverageCPUUtilization"
    ECS_SERVICE_AVERAGE_MEMORY_UTILIZATION = "ECSServiceAverageMemoryUtilization"


class ScalableTargetProps(BaseModel):
    service_namespace: ServiceNamespace
    scalable_dimension: str
    resource_id: str
    role: str
    min_capacity: int
    max_capacity: int

    @model_validator(mode="after")
    def _check_capacity(self) -> "ScalableTargetProps":
        if self.min_capacity < 0:
            raise ValueError(f"min_capacity cannot be negative, got: {self.min_capacity}")
        if self.max_capacity < 0:
            raise ValueError(f"max_capacity cannot be negative, got: {self.max_capacity}")
        if self.max_capacity < self.min_capacity:
            raise ValueError(
                f"min_capacity ({self.min_capacity}) should be lower than max_capacity ({self.max_capacity})"
            )
        return self


class ScalingSchedule(BaseModel):
    """A scheduled capacity change.

    `schedule` is an `at(...)`, `rate(...)` or `cron(...)` expression. At
    least one of the capacity bounds must be given.
    """

    schedule: str
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    min_capacity: Optional[int] = None
    max_capacity: Optional[int] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "ScalingSchedule":
        if self.min_capacity is None and self.max_capacity is None:
            raise ValueError("You must supply at least one of min_capacity or max_capacity")
        return self


class ScalingInterval(BaseModel):
    lower: Optional[float] = None
    upper: Optional[float] = None
    change: float

    @model_validator(mode="after")
    def _check_range(self) -> "ScalingInterval":
        if self.lower is None and self.upper is None:
            raise ValueError("A scaling interval needs a lower or an upper bound")
        return self


class BasicStepScalingPolicyProps(BaseModel):
    metric: str
    scaling_steps: List[ScalingInterval]
    adjustment_type: Optional[AdjustmentType] = None
    cooldown_sec: Optional[int] = None
    min_adjustment_magnitude: Optional[int] = None

    @model_validator(mode="after")
    def _check_steps(self) -> "BasicStepScalingPolicyProps":
        if len(self.scaling_steps) < 2:
            raise ValueError("You must supply at least 2 intervals for autoscaling")
        return self


class BasicTargetTrackingScalingPolicyProps(BaseModel):
    target_value: float
    predefined_metric: Optional[PredefinedMetric] = None
    resource_label: Optional[str] = None
    custom_metric: Optional[str] = None
    disable_scale_in: bool = False
    scale_in_cooldown_sec: Optional[int] = Field(default=None, ge=0)
    scale_out_cooldown_sec: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_metric(self) -> "BasicTargetTrackingScalingPolicyProps":
        if (self.predefined_metric is None) == (self.custom_metric is None):
            raise ValueError("Exactly one of 'custom_metric' or 'predefined_metric' is required")
        return self


@dataclass
class ScalingRegistration:
    """One scheduled action or policy registered on a target."""
    id: str
    props: Any


class ScalingCapability(Protocol):
    """The three scaling registrations a scalable target offers."""

    def scale_on_schedule(self, id: str, schedule: Any) -> None:  # pylint: disable=redefined-builtin
        ...

    def scale_on_metric(self, id: str, props: Any) -> None:  # pylint: disable=redefined-builtin
        ...

    def scale_to_track_metric(self, id: str, props: Any) -> None:  # pylint: disable=redefined-builtin
        ...


def _coerce(model_cls: Type[M], value: Any) -> M:
    """Accept either a model instance or a plain dict of its fields."""
    if isinstance(value, model_cls):
        return value
    if isinstance(value, dict):
        return model_cls.model_validate(value)
    raise TypeError(f"expected {model_cls.__name__} or dict, got {type(value).__name__}")


class ScalableTarget(Construct):
    """In-memory scalable target holding capacity bounds and registrations."""

    def __init__(self, scope: Optional[Construct], id: str, props: Any) -> None:  # pylint: disable=redefined-builtin
        self.props = _coerce(ScalableTargetProps, props)
        super().__init__(scope, id)
        self.scheduled_actions: List[ScalingRegistration] = []
        self.step_policies: List[ScalingRegistration] = []
        self.tracking_policies: List[ScalingRegistration] = []
        self._registered_ids: Set[str] = set()

    @property
    def min_capacity(self) -> int:
        return self.props.min_capacity

    @property
    def max_capacity(self) -> int:
        return self.props.max_capacity

    def _claim(self, id: str) -> None:  # pylint: disable=redefined-builtin
        if id in self._registered_ids:
            raise ValueError(f"There is already a scaling registration with id '{id}' on {self.path}")
        self._registered_ids.add(id)

    def scale_on_schedule(self, id: str, schedule: Any) -> None:  # pylint: disable=redefined-builtin
        """Register a scheduled action that changes the capacity bounds."""
        schedule = _coerce(ScalingSchedule, schedule)
        self._claim(id)
        self.scheduled_actions.append(ScalingRegistration(id, schedule))
        logger.debug("registered scheduled action %s on %s", id, self.path)

    def scale_on_metric(self, id: str, props: Any) -> None:  # pylint: disable=redefined-builtin
        """Register a step scaling policy driven by a metric."""
        props = _coerce(BasicStepScalingPolicyProps, props)
        self._claim(id)
        self.step_policies.append(ScalingRegistration(id, props))
        logger.debug("registered step scaling policy %s on %s", id, self.path)

    def scale_to_track_metric(self, id: str, props: Any) -> None:  # pylint: disable=redefined-builtin
        """Register a target tracking policy."""
        props = _coerce(BasicTargetTrackingScalingPolicyProps, props)
        self._claim(id)
        self.tracking_policies.append(ScalingRegistration(id, props))
        logger.debug("registered target tracking policy %s on %s", id, self.path)
