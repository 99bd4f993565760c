# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import os
from contextlib import contextmanager


class BuildRoot(object):
  """Represents the Android project root, the directory gradle calls the `rootProject`.

  The root is found by walking up from the working directory to the first directory holding a
  gradle settings script. It can also be set explicitly, which is what tests do.
  """

  class NotFoundError(Exception):
    """Raised when unable to find the current workspace build root."""

  SETTINGS_FILES = ('settings.gradle.kts', 'settings.gradle')

  _root_dir = None

  @classmethod
  def find(cls, start_dir=None):
    """Return the closest directory at or above `start_dir` holding a gradle settings file."""
    current = os.path.realpath(start_dir or os.getcwd())
    while True:
      if any(os.path.isfile(os.path.join(current, name)) for name in cls.SETTINGS_FILES):
        return current
      parent = os.path.dirname(current)
      if parent == current:
        raise cls.NotFoundError('No build root detected for {0}. Looked for one of {1} in this '
                                'directory and its parents.'
                                .format(start_dir or os.getcwd(), ', '.join(cls.SETTINGS_FILES)))
      current = parent

  @property
  def path(self):
    """Return the root directory of the current workspace."""
    if BuildRoot._root_dir is None:
      BuildRoot._root_dir = self.find()
    return BuildRoot._root_dir

  @path.setter
  def path(self, root_dir):
    path = os.path.realpath(root_dir)
    if not os.path.isdir(path):
      raise ValueError('Build root does not exist: {0}'.format(root_dir))
    BuildRoot._root_dir = path

  def reset(self):
    """Clear the last detected build root."""
    BuildRoot._root_dir = None

  @contextmanager
  def temporary(self, path):
    """Set up a temporary build root context, restoring the previous root on exit."""
    prior = BuildRoot._root_dir
    self.path = path
    try:
      yield
    finally:
      BuildRoot._root_dir = prior


def get_buildroot():
  """Return the current build root directory."""
  return BuildRoot().path
