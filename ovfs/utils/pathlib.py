def joinpath(root: str, path: str) -> str:
  ''' Join `path` onto `root` with exactly one separator between them.
  No other normalization takes place, `..` and `.` are passed through.
  '''
  return root.rstrip('/') + '/' + str(path).lstrip('/')

def pathparent(path: str):
  parent, sep, _name = str(path).rstrip('/').rpartition('/')
  if parent == '': return sep or ''
  else: return parent

def pathname(path: str):
  _parent, sep, name = str(path).rstrip('/').rpartition('/')
  if not name: return sep or ''
  else: return name
