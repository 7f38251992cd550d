"""Smoke test to ensure the top-level package import exposes the flat API
without importing matplotlib eagerly.
"""


def test_import_numgeo_smoke():
    import numgeo
    for name in ('Averager', 'ComparisonResult', 'minimum', 'maximum', 'clamp', 'equals',
                 'is_between', 'IntegerPath', 'FractionPath', 'describe_intersection'):
        assert hasattr(numgeo, name), name
    assert isinstance(numgeo.__version__, str)


def test_facade_round_trip():
    import numgeo
    path = numgeo.IntPath([(0, 0), (2, 0)]) + (1, 0)
    assert path.intersects_self
    avg = numgeo.Averager().average(1, 2, 3)
    assert numgeo.ComparisonResult.of(avg, 3) is numgeo.ComparisonResult.ASCENDING


def test_lazy_visualization_proxy_resolves():
    import numgeo
    assert callable(numgeo.visualization.plot_path)
