''' Compatibility with fsspec filesystems, the backing root can live anywhere
fsspec reaches (memory, zip archives, object stores).

Usage:
from fsspec.implementations.memory import MemoryFileSystem
store = DirStore('/assets', driver=FSSpec(MemoryFileSystem()))
'''
import json
import fsspec
from datetime import datetime
from ovfs.spec import Driver
from ovfs.utils.pathlib import pathname

def fsspec_info_to_ovfs_info(info):
  atime = info.get('atime')
  if isinstance(atime, datetime): atime = atime.timestamp()
  ctime = info.get('ctime', info.get('created', info.get('CreationDate')))
  if isinstance(ctime, datetime): ctime = ctime.timestamp()
  mtime = info.get('mtime', info.get('modified', info.get('LastModified')))
  if isinstance(mtime, datetime): mtime = mtime.timestamp()
  return {
    'type': info['type'] if info['type'] in ('file', 'directory') else 'other',
    'size': info.get('size') or 0,
    'atime': atime,
    'ctime': ctime,
    'mtime': mtime,
  }

class FSSpec(Driver):
  def __init__(self, fs: fsspec.AbstractFileSystem):
    super().__init__()
    self._fs = fs

  @staticmethod
  def from_dict(*, fs):
    return FSSpec(
      fs=fsspec.AbstractFileSystem.from_json(json.dumps(fs)),
    )

  def to_dict(self):
    return dict(super().to_dict(),
      fs=json.loads(self._fs.to_json()),
    )

  def info(self, path):
    return fsspec_info_to_ovfs_info(self._fs.info(path))

  def open(self, path):
    if self.info(path)['type'] == 'directory':
      raise IsADirectoryError(path)
    return self._fs.open(path, 'rb')

  def ls(self, path):
    if self.info(path)['type'] != 'directory':
      raise NotADirectoryError(path)
    return iter([
      pathname(item)
      for item in self._fs.ls(path, detail=False)
    ])
