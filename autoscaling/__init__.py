"""Application autoscaling constructs: scalable targets and attribute facades."""

from .base_scalable_attribute import BaseScalableAttribute, BaseScalableAttributeProps
from .construct import Construct
from .scalable_table_attribute import ScalableTableAttribute
from .scalable_target import (
    AdjustmentType,
    BasicStepScalingPolicyProps,
    BasicTargetTrackingScalingPolicyProps,
    PredefinedMetric,
    ScalableTarget,
    ScalableTargetProps,
    ScalingCapability,
    ScalingInterval,
    ScalingSchedule,
    ServiceNamespace,
)

__all__ = [
    "AdjustmentType",
    "BaseScalableAttribute",
    "BaseScalableAttributeProps",
    "BasicStepScalingPolicyProps",
    "BasicTargetTrackingScalingPolicyProps",
    "Construct",
    "PredefinedMetric",
    "ScalableTableAttribute",
    "ScalableTarget",
    "ScalableTargetProps",
    "ScalingCapability",
    "ScalingInterval",
    "ScalingSchedule",
    "ServiceNamespace",
]
