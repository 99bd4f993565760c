# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from apkconf.backend.android.targets.android_binary import AndroidBinary
from apkconf_test.tasks.task_test_base import TaskTestBase


class TestAndroidBase(TaskTestBase):
  """Base class for tests of android tasks, working on the 'app' module of a flutter project."""

  def android_binary(self, name='app', namespace='com.example.habittracker', **kwargs):
    return AndroidBinary(name, namespace=namespace, **kwargs)

  def key_properties(self, relpath='key.properties', **properties):
    """Write a key.properties file under the build root and return its path."""
    content = ''.join('{0}={1}\n'.format(key, value) for key, value in sorted(properties.items()))
    return self.create_file(relpath, content)
