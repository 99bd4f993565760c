# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from apkconf.backend.android.targets.android_target import AndroidTarget
from apkconf.backend.android.targets.build_type import BuildType
from apkconf.base.exceptions import TargetDefinitionException


class AndroidBinary(AndroidTarget):
  """Produces an Android binary."""

  def __init__(self, name, application_id=None, build_types=None, **kwargs):
    """
    :param string application_id: The id the binary is published under. Defaults to the
      namespace.
    :param build_types: The BuildType variants of the binary. Defaults to unsigned 'release' and
      'debug' variants with minification and resource shrinking disabled.
    """
    super(AndroidBinary, self).__init__(name, **kwargs)
    self.application_id = application_id or self.namespace
    if build_types is None:
      build_types = [BuildType(BuildType.RELEASE), BuildType(BuildType.DEBUG)]
    self._build_types = {}
    for build_type in build_types:
      if build_type.name in self._build_types:
        raise TargetDefinitionException(self, "Duplicate build type '{0}'.".format(build_type.name))
      self._build_types[build_type.name] = build_type

  @property
  def build_types(self):
    return list(self._build_types.values())

  def build_type(self, name):
    """Return the named BuildType.

    :raises: TargetDefinitionException if the binary has no such build type.
    """
    try:
      return self._build_types[name]
    except KeyError:
      raise TargetDefinitionException(self, "There is no '{0}' build type. Declared build types "
                                            "are: {1}".format(name, ', '.join(self._build_types)))

  @property
  def release(self):
    return self.build_type(BuildType.RELEASE)

  @property
  def debug(self):
    return self.build_type(BuildType.DEBUG)
