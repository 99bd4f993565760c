# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import os
from collections import namedtuple


class SigningCredentials(namedtuple('SigningCredentials',
                                    ['key_alias', 'key_password', 'store_file', 'store_password'])):
  """Represents the signing identity of a release build, as read from a key.properties file."""

  # Maps each field to its key in the properties file.
  PROPERTY_KEYS = (
    ('key_alias', 'keyAlias'),
    ('key_password', 'keyPassword'),
    ('store_file', 'storeFile'),
    ('store_password', 'storePassword'),
  )

  __slots__ = ()

  def __new__(cls, key_alias='', key_password='', store_file='', store_password=''):
    """
    :param string key_alias: The alias of the key within the keystore.
    :param string key_password: The password for the key.
    :param string store_file: path/to/keystore, relative paths resolve against the module dir.
    :param string store_password: The password for the keystore.
    """
    return super(SigningCredentials, cls).__new__(cls, key_alias, key_password, store_file,
                                                  store_password)

  @classmethod
  def empty(cls):
    return cls()

  @classmethod
  def from_properties(cls, properties):
    """Create credentials from a dict of properties; missing keys become empty strings."""
    return cls(**{field: properties.get(key) or '' for field, key in cls.PROPERTY_KEYS})

  @property
  def has_store_file(self):
    return self.store_file != ''

  def store_path(self, relative_to):
    """Return the absolute path of the keystore, or None if no store file is set.

    :param string relative_to: The module directory relative store files are resolved against.
    """
    if not self.has_store_file:
      return None
    path = os.path.expandvars(os.path.expanduser(self.store_file))
    return os.path.normpath(os.path.join(relative_to, path))

  def __repr__(self):
    def mask(secret):
      return '****' if secret else "''"
    return ('SigningCredentials(key_alias={0!r}, key_password={1}, store_file={2!r}, '
            'store_password={3})'.format(self.key_alias, mask(self.key_password),
                                         self.store_file, mask(self.store_password)))
