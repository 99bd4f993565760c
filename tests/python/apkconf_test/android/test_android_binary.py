# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import os

from apkconf.backend.android.credentials.signing_credentials import SigningCredentials
from apkconf.backend.android.targets.build_type import BuildType
from apkconf.base.exceptions import TargetDefinitionException
from apkconf_test.android.test_android_base import TestAndroidBase


class TestAndroidBinary(TestAndroidBase):

  def test_defaults(self):
    binary = self.android_binary()
    self.assertEqual('com.example.habittracker', binary.application_id)
    self.assertEqual(os.path.join(self.build_root, 'app'), binary.module_dir)
    self.assertEqual(['release', 'debug'], [build_type.name for build_type in binary.build_types])
    for build_type in binary.build_types:
      self.assertFalse(build_type.is_signed)
      self.assertFalse(build_type.minify_enabled)
      self.assertFalse(build_type.shrink_resources)

  def test_application_id(self):
    binary = self.android_binary(application_id='com.example.other')
    self.assertEqual('com.example.other', binary.application_id)
    self.assertEqual('com.example.habittracker', binary.namespace)

  def test_module_dir(self):
    binary = self.android_binary(module_dir=os.path.join('android', 'app'))
    self.assertEqual(os.path.join(self.build_root, 'android', 'app'), binary.module_dir)

  def test_signed_build_type(self):
    build_type = BuildType(BuildType.RELEASE, signing_config=SigningCredentials(store_file='a.jks'))
    self.assertTrue(build_type.is_signed)

  def test_missing_build_type(self):
    binary = self.android_binary(build_types=[BuildType(BuildType.DEBUG)])
    self.assertIs(binary.debug, binary.build_type('debug'))
    with self.assertRaises(TargetDefinitionException):
      binary.release

  def test_duplicate_build_type(self):
    with self.assertRaises(TargetDefinitionException):
      self.android_binary(build_types=[BuildType(BuildType.RELEASE), BuildType(BuildType.RELEASE)])
