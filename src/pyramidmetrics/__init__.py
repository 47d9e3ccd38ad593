from importlib.metadata import version
__version__ = version("pyramidmetrics")

# Configuration
from .config_classes import DEFAULT_CONSTANTS, DEFAULT_THRESHOLDS, DegeneracyThresholds, NormalizationConstants

# Element and results
from .element import Pyramid, PyramidArityError
from .outcome import MetricOutcome, MetricStatus

# Metrics
from .metrics import (
    base_planarity_deviation,
    evaluate_pyramid_jacobian,
    evaluate_pyramid_scaled_jacobian,
    evaluate_pyramid_shape,
    evaluate_pyramid_volume,
    pyramid_jacobian,
    pyramid_scaled_jacobian,
    pyramid_shape,
    pyramid_volume,
)
from .quality import PyramidMetric, PyramidMetricVals, pyramid_quality

# Utilities
from .utils import configure_debug_logging, quality_report

__all__ = [
    # Main interfaces
    'pyramid_quality',
    'PyramidMetric',
    'PyramidMetricVals',

    # Element
    'Pyramid',
    'PyramidArityError',

    # Individual metrics
    'pyramid_volume',
    'pyramid_jacobian',
    'pyramid_scaled_jacobian',
    'pyramid_shape',
    'evaluate_pyramid_volume',
    'evaluate_pyramid_jacobian',
    'evaluate_pyramid_scaled_jacobian',
    'evaluate_pyramid_shape',
    'MetricOutcome',
    'MetricStatus',

    # Diagnostics
    'base_planarity_deviation',
    'quality_report',
    'configure_debug_logging',

    # Configuration
    'DegeneracyThresholds',
    'NormalizationConstants',
    'DEFAULT_THRESHOLDS',
    'DEFAULT_CONSTANTS',
]
