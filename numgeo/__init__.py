"""Public package API for the numgeo numeric and geometry kernel.

This facade provides a flat import surface on top of the implementation
package ``numgeo.core`` while deferring the matplotlib-backed visualization
module until first use to keep ``import numgeo`` fast.

Example
-------
    from numgeo import Averager, IntegerPath, ComparisonResult, clamp

The deeper modules (``numgeo.core.*``) may be reorganised; rely on this layer
for public symbols.
"""
from importlib import import_module as _imp
import logging as _logging

try:
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("numgeo")
except _NotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

# Eager light-weight submodules
_const = _imp('numgeo.core.constants')
_numeric = _imp('numgeo.core.numeric')
_config = _imp('numgeo.core.config')
_cmp = _imp('numgeo.core.comparisons')
_avg = _imp('numgeo.core.averager')
_geom = _imp('numgeo.core.geometry')
_path = _imp('numgeo.core.path')
_log = _imp('numgeo.core.logging_utils')


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)
        def _load(self):
            try:
                return self._m
            except AttributeError:
                self._m = _imp(mod_name)
                return self._m
        def __getattr__(self, item):
            if item == '_m':
                raise AttributeError(item)
            return getattr(self._load(), item)
        def __dir__(self):
            return dir(self._load())
    return _ModuleProxy()


# Lazily loaded matplotlib-backed module
visualization = _lazy_module('numgeo.core.visualization')


def plot_path(*args, **kwargs):
    return visualization.plot_path(*args, **kwargs)


# Comparison kernel
ComparisonResult = _cmp.ComparisonResult
ComparisonQueue = _cmp.ComparisonQueue
minimum = _cmp.minimum
maximum = _cmp.maximum
clamp = _cmp.clamp
equals = _cmp.equals
is_between = _cmp.is_between
natural_order = _cmp.natural_order
sorted_with = _cmp.sorted_with
sorted_queue = _cmp.sorted_queue

# Numeric kind probe
NumberKind = _numeric.NumberKind
kind_of = _numeric.kind_of

# Averaging
Averager = _avg.Averager

# Geometry and paths
Point = _geom.Point
LineSegment = _geom.LineSegment
IntersectionDescription = _geom.IntersectionDescription
describe_intersection = _geom.describe_intersection
Path = _path.Path
ComputablePath = _path.ComputablePath
IntegerPath = _path.IntegerPath
FractionPath = _path.FractionPath
IntPath = _path.IntPath
Int64Path = _path.Int64Path
FloatPath = _path.FloatPath
Float64Path = _path.Float64Path

# Configuration, tolerances and logging
ToleranceConfig = _config.ToleranceConfig
get_tolerance_config = _config.get_tolerance_config
set_tolerance_config = _config.set_tolerance_config
DEFAULT_FRACTION_TOLERANCE = _const.DEFAULT_FRACTION_TOLERANCE
DEFAULT_INTEGER_TOLERANCE = _const.DEFAULT_INTEGER_TOLERANCE
configure_logging = _log.configure_logging
get_logger = _log.get_logger

# Namespace submodules for exploratory users
constants = _const
numeric = _numeric
comparisons = _cmp
geometry = _geom
path = _path

__all__ = [
    '__version__',
    # comparisons
    'ComparisonResult', 'ComparisonQueue', 'minimum', 'maximum', 'clamp', 'equals', 'is_between',
    'natural_order', 'sorted_with', 'sorted_queue',
    # numbers
    'NumberKind', 'kind_of', 'Averager',
    # geometry
    'Point', 'LineSegment', 'IntersectionDescription', 'describe_intersection',
    'Path', 'ComputablePath', 'IntegerPath', 'FractionPath', 'IntPath', 'Int64Path', 'FloatPath', 'Float64Path',
    'plot_path',
    # configuration
    'ToleranceConfig', 'get_tolerance_config', 'set_tolerance_config',
    'DEFAULT_FRACTION_TOLERANCE', 'DEFAULT_INTEGER_TOLERANCE',
    'configure_logging', 'get_logger',
    # submodules / namespaces
    'constants', 'numeric', 'comparisons', 'geometry', 'path', 'visualization',
]
