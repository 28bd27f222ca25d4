''' A store rooted at a single directory of a driver.
Every lookup is resolved by joining the root with the requested path.

Usage:
store = DirStore('/some/assets')
store = DirStore('/assets', driver=FSSpec(MemoryFileSystem()))
'''

import logging
import typing as t
from ovfs.spec import ReadOnlyUFS, Driver, ClosedError
from ovfs.impl.local import Local
from ovfs.utils.pathlib import joinpath

logger = logging.getLogger(__name__)

class DirStore(ReadOnlyUFS):
  def __init__(self, root: str, driver: t.Optional[Driver] = None):
    '''
    root: the backing directory, absolute or relative to the process
    driver: the driver to resolve through, this store takes ownership of it
    '''
    super().__init__()
    if not root: raise ValueError('root must not be empty')
    self._root = str(root)
    self._driver = driver if driver is not None else Local()
    self._driver.start()
    self._closed = False

  @staticmethod
  def from_dict(*, root, driver=None):
    return DirStore(
      root=root,
      driver=Driver.from_dict(**driver) if driver is not None else None,
    )

  def to_dict(self):
    return dict(super().to_dict(),
      root=self._root,
      driver=self._driver.to_dict(),
    )

  @property
  def root(self) -> str:
    return self._root

  @property
  def closed(self) -> bool:
    return self._closed

  def _path(self, path):
    if self._closed: raise ClosedError(f"{self!r} is closed")
    return joinpath(self._root, path)

  def stat(self, path):
    try:
      return self._driver.info(self._path(path))
    except (FileNotFoundError, NotADirectoryError):
      return None

  def open_for_input(self, path):
    return self._driver.open(self._path(path))

  def open_dir(self, path):
    return self._driver.ls(self._path(path))

  def close(self):
    if self._closed: return
    logger.debug(f"releasing {self._root}")
    self._closed = True
    self._driver.stop()
