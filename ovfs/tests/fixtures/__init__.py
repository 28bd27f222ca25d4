import pytest
import pathlib

@pytest.fixture(params=[
  p.stem
  for p in pathlib.Path(__file__).parent.glob('[!_]*.py')
])
def backend(request):
  ''' Load different drivers from the fixtures directory to be tested uniformly

  Each yields (driver, make_root) where `driver()` builds a fresh driver and
  `make_root(name, files)` creates a root populated with `files`, a mapping of
  relative path to text content (or None for a directory), returning the root.
  '''
  import importlib
  yield from importlib.import_module(f"ovfs.tests.fixtures.{request.param}").backend()
