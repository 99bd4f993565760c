# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from abc import ABCMeta, abstractmethod


class Task(object, metaclass=ABCMeta):
  """An executable step of a configuration run.

  Subclasses implement `execute`, reading their options from `self.context.config`.
  """

  def __init__(self, context):
    self.context = context

  def get_option(self, option):
    """Return the value of a registered ConfigOption for this run."""
    return self.context.config.get_option(option)

  @abstractmethod
  def execute(self):
    """Executes this task."""
