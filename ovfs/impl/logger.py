''' A store wrapper for logging.
This logs all operations it passes through to the underlying store.

Usage:
store = Logger(Overlay(['/base', '/override']))
'''

import logging
import traceback
from ovfs.spec import ReadOnlyUFS

logger = logging.getLogger(__name__)

class Logger(ReadOnlyUFS):
  def __init__(self, store: ReadOnlyUFS, level: int = logging.DEBUG):
    super().__init__()
    self._store = store
    self._level = level
    self._logger = logger.getChild(self._store.__class__.__name__)

  @staticmethod
  def from_dict(*, store, level=logging.DEBUG):
    return Logger(
      store=ReadOnlyUFS.from_dict(**store),
      level=level,
    )

  def to_dict(self):
    return dict(super().to_dict(),
      store=self._store.to_dict(),
      level=self._level,
    )

  def __getattr__(self, attr):
    # forward the extras (root, mount, containing_dir, ...) of the wrapped store
    if attr.startswith('_'): raise AttributeError(attr)
    value = getattr(self._store, attr)
    if not callable(value): return value
    return lambda *args, **kwargs: self._call(attr, *args, **kwargs)

  def _call(self, op, *args, **kwargs):
    method = f"{op}({', '.join([*[repr(arg) for arg in args], *[key + '=' + repr(value) for key, value in kwargs.items()]])})"
    try:
      ret = getattr(self._store, op)(*args, **kwargs)
      self._logger.log(self._level, f"{method} -> {ret!r}")
      return ret
    except Exception as e:
      self._logger.error(f"{method} raised {traceback.format_exc()}")
      raise e

  def stat(self, path):
    return self._call('stat', path)
  def open_for_input(self, path):
    return self._call('open_for_input', path)
  def open_dir(self, path):
    return self._call('open_dir', path)
  def containing_dir(self, path):
    return self._call('containing_dir', path)

  def start(self):
    return self._call('start')
  def close(self):
    return self._call('close')
