# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import os
import unittest

from apkconf.backend.android.credentials.signing_credentials import SigningCredentials
from apkconf.util.contextutil import environment_as


class TestSigningCredentials(unittest.TestCase):
  """Test the SigningCredentials record."""

  def test_empty(self):
    credentials = SigningCredentials.empty()
    self.assertEqual(('', '', '', ''), tuple(credentials))
    self.assertFalse(credentials.has_store_file)
    self.assertIsNone(credentials.store_path('/project/app'))

  def test_from_properties(self):
    credentials = SigningCredentials.from_properties({'keyAlias': 'upload',
                                                      'keyPassword': 'pw1',
                                                      'storeFile': 'upload.jks',
                                                      'storePassword': 'pw2',
                                                      'unrelated': 'ignored'})
    self.assertEqual(SigningCredentials('upload', 'pw1', 'upload.jks', 'pw2'), credentials)
    self.assertTrue(credentials.has_store_file)

  def test_missing_keys_default_to_empty(self):
    credentials = SigningCredentials.from_properties({'keyAlias': 'upload'})
    self.assertEqual('upload', credentials.key_alias)
    self.assertEqual('', credentials.key_password)
    self.assertEqual('', credentials.store_file)
    self.assertEqual('', credentials.store_password)

  def test_immutable(self):
    credentials = SigningCredentials(store_file='upload.jks')
    with self.assertRaises(AttributeError):
      credentials.store_file = 'other.jks'

  def test_store_path_is_relative_to_module(self):
    credentials = SigningCredentials(store_file='keys/../upload.jks')
    self.assertEqual(os.path.join('/project', 'app', 'upload.jks'),
                     credentials.store_path(os.path.join('/project', 'app')))

  def test_store_path_absolute(self):
    credentials = SigningCredentials(store_file='/secure/upload.jks')
    self.assertEqual('/secure/upload.jks', credentials.store_path('/project/app'))

  def test_store_path_expands_variables(self):
    with environment_as(KEYS_DIR='/secure'):
      credentials = SigningCredentials(store_file='$KEYS_DIR/upload.jks')
      self.assertEqual('/secure/upload.jks', credentials.store_path('/project/app'))

  def test_repr_masks_passwords(self):
    rendered = repr(SigningCredentials('upload', 'secret1', 'upload.jks', 'secret2'))
    self.assertNotIn('secret1', rendered)
    self.assertNotIn('secret2', rendered)
    self.assertIn("'upload'", rendered)
    self.assertIn("'upload.jks'", rendered)
