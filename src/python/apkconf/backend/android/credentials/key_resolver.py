# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import logging
import os
from collections import namedtuple

from apkconf.backend.android.credentials.signing_credentials import SigningCredentials
from apkconf.config.config import ConfigError
from apkconf.config.properties import Properties


logger = logging.getLogger(__name__)


class ReleaseSigning(namedtuple('ReleaseSigning', ['found', 'credentials'])):
  """The credentials read for the release variant and whether their properties file existed."""

  __slots__ = ()

  @property
  def should_sign(self):
    """Return True if the release variant is to be signed with the credentials."""
    return self.found and self.credentials.has_store_file

  @property
  def signing_config(self):
    """The credentials to sign the release variant with, or None to leave it unsigned."""
    return self.credentials if self.should_sign else None


class KeyResolver(object):
  """Read a key.properties file and instantiate the release SigningCredentials with its info."""

  class Error(ConfigError):
    """Indicates a properties file that exists but could not be resolved into credentials."""

  @classmethod
  def resolve_release(cls, properties_file):
    """Parse a key.properties file and return a ReleaseSigning.

    A missing file is not an error, it resolves to empty credentials that are never applied.
    """
    if not os.path.exists(properties_file):
      logger.debug('No signing properties at {0}.'.format(properties_file))
      return ReleaseSigning(found=False, credentials=SigningCredentials.empty())
    try:
      properties = Properties.load(properties_file)
    except Properties.Error as e:
      raise cls.Error('Unable to resolve signing credentials: {0}'.format(e))
    return ReleaseSigning(found=True, credentials=SigningCredentials.from_properties(properties))

  @classmethod
  def resolve(cls, properties_file):
    """Parse a key.properties file and return a SigningCredentials object."""
    return cls.resolve_release(properties_file).credentials

  @classmethod
  def release_signing_config(cls, properties_file):
    """Return the credentials to sign the release variant with, or None to leave it unsigned."""
    return cls.resolve_release(properties_file).signing_config
