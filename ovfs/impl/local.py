''' A physical storage driver
'''
import os
import stat
from ovfs.spec import Driver

class ScandirNames:
  ''' Entry names of an `os.scandir` handle, the handle is released when
  exhausted, on `close()` or when this iterator is collected.
  '''
  def __init__(self, entries):
    self._entries = entries
  def __iter__(self):
    return self
  def __next__(self):
    try:
      return next(self._entries).name
    except StopIteration:
      self.close()
      raise
  def close(self):
    self._entries.close()
  def __enter__(self):
    return self
  def __exit__(self, *args):
    self.close()
  def __del__(self):
    self.close()

class Local(Driver):
  def info(self, path):
    info = os.stat(path)
    if stat.S_ISDIR(info.st_mode):
      type = 'directory'
    elif stat.S_ISREG(info.st_mode):
      type = 'file'
    else:
      type = 'other'
    return {
      'type': type,
      'size': info.st_size,
      'atime': info.st_atime,
      'ctime': info.st_ctime,
      'mtime': info.st_mtime,
    }
  def open(self, path):
    return open(path, 'rb')
  def ls(self, path):
    # scandir raises now, entries are produced as they are consumed
    return ScandirNames(os.scandir(path))
