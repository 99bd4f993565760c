# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import errno
import os


def safe_mkdir(directory):
  """Ensure a directory is present, creating intermediate directories as needed."""
  try:
    os.makedirs(directory)
  except OSError as e:
    if e.errno != errno.EEXIST:
      raise


def safe_mkdir_for(path):
  """Ensure that the parent directory for a file is present."""
  safe_mkdir(os.path.dirname(path))


def safe_open(filename, *args, **kwargs):
  """Open a file safely, ensuring that its directory exists."""
  safe_mkdir_for(filename)
  return open(filename, *args, **kwargs)


def touch(path):
  """Create an empty file at `path`, or update its mtime if it already exists."""
  with safe_open(path, 'a'):
    os.utime(path, None)
