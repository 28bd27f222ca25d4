from datetime import datetime, timezone

def test_fsspec_info_without_times():
  from ovfs.impl.fsspec import fsspec_info_to_ovfs_info
  info = fsspec_info_to_ovfs_info({'name': '/a.txt', 'type': 'file', 'size': 3})
  assert info == {
    'type': 'file',
    'size': 3,
    'atime': None,
    'ctime': None,
    'mtime': None,
  }

def test_fsspec_info_with_times():
  from ovfs.impl.fsspec import fsspec_info_to_ovfs_info
  modified = datetime(2024, 1, 2, tzinfo=timezone.utc)
  info = fsspec_info_to_ovfs_info({'name': '/d', 'type': 'directory', 'size': None, 'created': 10.0, 'modified': modified})
  assert info['type'] == 'directory'
  assert info['size'] == 0
  assert info['atime'] is None
  assert info['ctime'] == 10.0
  assert info['mtime'] == modified.timestamp()

def test_fsspec_info_other_kind():
  from ovfs.impl.fsspec import fsspec_info_to_ovfs_info
  assert fsspec_info_to_ovfs_info({'name': '/l', 'type': 'link', 'size': 0})['type'] == 'other'
