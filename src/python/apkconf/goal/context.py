# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from apkconf.config.config import Config


class Context(object):
  """Contains the context for a single configuration run.

  Tasks are handed the config and the targets to operate on through this object.
  """

  def __init__(self, config=None, target_roots=None):
    """
    :param config: The Config to read options from. Loaded from the build root if not given.
    :param list target_roots: The targets of this run.
    """
    self._config = config
    self._target_roots = list(target_roots or [])

  @property
  def config(self):
    if self._config is None:
      self._config = Config.load()
    return self._config

  @property
  def target_roots(self):
    return self._target_roots

  def targets(self, predicate=None):
    """Return the targets of this run, optionally filtered by `predicate`."""
    return [target for target in self._target_roots if predicate is None or predicate(target)]
