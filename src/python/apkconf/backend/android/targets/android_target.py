# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import os

from apkconf.base.build_environment import get_buildroot


class AndroidTarget(object):
  """A base class for all Android targets."""

  def __init__(self, name, module_dir=None, namespace=None):
    """
    :param string name: Name of the gradle module, e.g. 'app'.
    :param string module_dir: path/to/module. Relative paths are relative to the build root.
      Defaults to the directory named after the module.
    :param string namespace: The package namespace of the generated R and BuildConfig classes.
    """
    self.name = name
    self._module_dir = module_dir or name
    self.namespace = namespace

  @property
  def module_dir(self):
    return os.path.join(get_buildroot(), self._module_dir)

  def __repr__(self):
    return '{0}({1})'.format(self.__class__.__name__, self.name)
