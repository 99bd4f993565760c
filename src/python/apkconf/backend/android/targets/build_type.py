# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).


class BuildType(object):
  """A build variant of an Android binary, e.g. 'debug' or 'release'."""

  RELEASE = 'release'
  DEBUG = 'debug'

  def __init__(self, name, signing_config=None, minify_enabled=False, shrink_resources=False):
    """
    :param string name: Name of the build type.
    :param signing_config: The SigningCredentials this variant is signed with. None leaves the
      variant to the default signing policy of the build tool.
    :param bool minify_enabled: Whether code shrinking runs for this variant.
    :param bool shrink_resources: Whether unused resources are removed from this variant.
    """
    self.name = name
    self.signing_config = signing_config
    self.minify_enabled = minify_enabled
    self.shrink_resources = shrink_resources

  @property
  def is_signed(self):
    return self.signing_config is not None

  def __repr__(self):
    return 'BuildType({0}, signing_config={1!r})'.format(self.name, self.signing_config)
