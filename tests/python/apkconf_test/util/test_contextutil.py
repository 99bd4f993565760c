# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import os
import unittest

from apkconf.util.contextutil import environment_as, pushd, temporary_dir, temporary_file


class ContextutilTest(unittest.TestCase):

  def test_empty_environment(self):
    with environment_as():
      pass

  def test_override_single_variable(self):
    with environment_as(HORK='BORK'):
      self.assertEqual('BORK', os.environ['HORK'])
    self.assertNotIn('HORK', os.environ)

  def test_unset_variable(self):
    with environment_as(HORK='BORK'):
      with environment_as(HORK=None):
        self.assertNotIn('HORK', os.environ)
      self.assertEqual('BORK', os.environ['HORK'])

  def test_temporary_file(self):
    with temporary_file() as fp:
      fp.write('contents')
      fp.close()
      path = fp.name
      with open(path) as fd:
        self.assertEqual('contents', fd.read())
    self.assertFalse(os.path.exists(path))

  def test_temporary_file_without_cleanup(self):
    with temporary_file(cleanup=False) as fp:
      path = fp.name
    self.assertTrue(os.path.exists(path))
    os.unlink(path)

  def test_temporary_dir(self):
    with temporary_dir() as path:
      self.assertTrue(os.path.isdir(path))
    self.assertFalse(os.path.exists(path))

  def test_pushd(self):
    cwd = os.getcwd()
    with temporary_dir() as path:
      with pushd(path):
        self.assertEqual(os.path.realpath(path), os.path.realpath(os.getcwd()))
      self.assertEqual(cwd, os.getcwd())
