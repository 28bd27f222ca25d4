''' The read-only store contract shared by single-root stores and overlays
'''
import typing as t

FileType = t.Literal['file', 'directory', 'other']

class FileStat(t.TypedDict, total=False):
  type: FileType
  size: int
  atime: t.Optional[float]
  ctime: t.Optional[float]
  mtime: t.Optional[float]

class ClosedError(RuntimeError):
  ''' Raised when a store is used after it was closed
  '''

class Driver:
  ''' The single-root driver a store delegates to, paths are full driver paths
  '''
  @staticmethod
  def from_dict(*, cls, **kwargs):
    return ReadOnlyUFS.from_dict(cls=cls, **kwargs)

  def to_dict(self) -> t.Dict[str, t.Any]:
    cls = self.__class__
    return dict(cls=f"{cls.__module__}.{cls.__name__}")

  def info(self, path: str) -> FileStat:
    raise NotImplementedError()
  def open(self, path: str) -> t.BinaryIO:
    raise NotImplementedError()
  def ls(self, path: str) -> t.Iterator[str]:
    raise NotImplementedError()

  # optional
  def start(self):
    pass
  def stop(self):
    pass

  def __repr__(self) -> str:
    return f"{self.__class__.__name__}({repr(self.to_dict())})"

class ReadOnlyUFS:
  ''' A generic class interface for read-only stores, stores written against
  this surface can be swapped for an overlay transparently.
  '''
  CHUNK_SIZE = 5*1024

  @staticmethod
  def from_dict(*, cls, **kwargs):
    import importlib
    mod, _, name = cls.rpartition('.')
    cls = getattr(importlib.import_module(mod), name)
    if cls.from_dict in (ReadOnlyUFS.from_dict, Driver.from_dict): return cls(**kwargs)
    else: return cls.from_dict(**kwargs)

  def to_dict(self) -> t.Dict[str, t.Any]:
    cls = self.__class__
    return dict(cls=f"{cls.__module__}.{cls.__name__}")

  # essential
  def stat(self, path: str) -> t.Optional[FileStat]:
    raise NotImplementedError()
  def open_for_input(self, path: str) -> t.Optional[t.BinaryIO]:
    raise NotImplementedError()
  def open_dir(self, path: str) -> t.Iterator[str]:
    raise NotImplementedError()

  # optional
  def start(self):
    pass
  def close(self):
    pass

  # fallback
  def exists(self, path: str) -> bool:
    return self.stat(path) is not None

  def containing_dir(self, path: str) -> t.Optional[str]:
    ''' The root of the store that holds `path`, for resolving sibling resources
    '''
    if not self.exists(path): return None
    return getattr(self, 'root', None)

  def cat(self, path: str) -> t.Iterator[bytes]:
    fh = self.open_for_input(path)
    if fh is None: raise FileNotFoundError(path)
    with fh:
      while True:
        buf = fh.read(self.CHUNK_SIZE)
        if not buf: break
        yield buf

  def __enter__(self):
    self.start()
    return self

  def __exit__(self, *args):
    self.close()

  def __repr__(self) -> str:
    return f"{self.__class__.__name__}({repr(self.to_dict())})"
