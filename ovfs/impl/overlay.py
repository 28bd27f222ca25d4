''' Like OverlayFS but read-only and with any number of layers -- lookups go to
the first mount that has the path, in the order the mounts were added.

Usage:
with Overlay() as overlay:
  overlay.mount('/game/base')
  overlay.mount('/game/mods')
  with overlay.open_for_input('textures/grass.png') as fh:
    ...
'''
import logging
import contextlib
import typing as t
from ovfs.spec import ReadOnlyUFS, Driver, ClosedError
from ovfs.impl.dir import DirStore
from ovfs.impl.local import Local

logger = logging.getLogger(__name__)

def _union(mounts: t.List[ReadOnlyUFS], path):
  seen = set()
  for mount in mounts:
    # each listing is only opened once the previous one is exhausted
    listing = mount.open_dir(path)
    try:
      for name in listing:
        if name in seen: continue
        seen.add(name)
        yield name
    finally:
      close = getattr(listing, 'close', None)
      if close is not None: close()

class Overlay(ReadOnlyUFS):
  def __init__(self, mounts: t.Sequence[t.Union[str, ReadOnlyUFS]] = (), driver: t.Callable[[], Driver] = Local):
    '''
    mounts: roots (or stores) to mount in order, earlier ones take precedence
    driver: called to create the driver for each root given to `mount`
    '''
    super().__init__()
    self._driver = driver
    self._mounts: t.List[ReadOnlyUFS] = []
    self._closed = False
    try:
      for mount in mounts:
        if isinstance(mount, ReadOnlyUFS):
          self.mount_store(mount)
        else:
          self.mount(mount)
    except BaseException:
      self.close()
      raise

  @staticmethod
  def from_dict(*, mounts):
    return Overlay(
      mounts=[ReadOnlyUFS.from_dict(**mount) for mount in mounts],
    )

  def to_dict(self):
    return dict(super().to_dict(),
      mounts=[mount.to_dict() for mount in self._mounts],
    )

  def _ensure_open(self):
    if self._closed: raise ClosedError(f"{self.__class__.__name__} is closed")

  @property
  def closed(self) -> bool:
    return self._closed

  @property
  def roots(self) -> t.Tuple[str, ...]:
    return tuple(getattr(mount, 'root', None) for mount in self._mounts)

  def __len__(self):
    return len(self._mounts)

  def mount(self, root: str) -> DirStore:
    ''' Append a store for `root`, the root is not checked until the first lookup
    '''
    self._ensure_open()
    return self.mount_store(DirStore(root, driver=self._driver()))

  def mount_store(self, store: ReadOnlyUFS) -> ReadOnlyUFS:
    ''' Append an already built store, the overlay takes ownership of it
    '''
    self._ensure_open()
    self._mounts.append(store)
    logger.debug(f"mounted {store!r} at position {len(self._mounts) - 1}")
    return store

  def is_mounted(self, root: str) -> bool:
    self._ensure_open()
    return any(getattr(mount, 'root', None) == root for mount in self._mounts)

  def _resolve(self, path):
    ''' Return (store, stat) for the first mount having `path`
    '''
    self._ensure_open()
    for mount in self._mounts:
      info = mount.stat(path)
      if info is not None:
        return mount, info
    return None, None

  def stat(self, path):
    _mount, info = self._resolve(path)
    return info

  def containing_dir(self, path) -> t.Optional[str]:
    mount, _info = self._resolve(path)
    if mount is None: return None
    return mount.containing_dir(path)

  def open_for_input(self, path):
    mount, _info = self._resolve(path)
    if mount is None:
      logger.debug(f"{path} not found in any mount")
      return None
    # the selected mount is authoritative, open errors are not retried elsewhere
    return mount.open_for_input(path)

  def open_dir(self, path):
    self._ensure_open()
    listed = []
    for mount in self._mounts:
      info = mount.stat(path)
      if info is None: continue
      if info['type'] != 'directory':
        if not listed: raise NotADirectoryError(path)
        continue
      listed.append(mount)
    if not listed: raise FileNotFoundError(path)
    return _union(listed, path)

  def close(self):
    if self._closed: return
    self._closed = True
    mounts, self._mounts = self._mounts, []
    with contextlib.ExitStack() as stack:
      for mount in mounts:
        stack.callback(mount.close)
    logger.debug(f"released {len(mounts)} mounts")
