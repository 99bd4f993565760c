# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import logging
import os

from apkconf.backend.android.credentials.key_resolver import KeyResolver
from apkconf.backend.android.targets.android_binary import AndroidBinary
from apkconf.base.build_environment import get_buildroot
from apkconf.base.exceptions import TaskError
from apkconf.config.config_option import ConfigOption
from apkconf.task.task import Task


logger = logging.getLogger(__name__)


class ConfigureSigning(Task):
  """Task to wire the release signing credentials into the release build type of binaries."""

  _CONFIG_SECTION = 'android-signing'

  KEY_PROPERTIES = ConfigOption.create(
    section=_CONFIG_SECTION,
    option='key_properties',
    help='Path, relative to the build root, of the properties file holding the release signing '
         'credentials.',
    default='key.properties')

  @staticmethod
  def is_signtarget(target):
    return isinstance(target, AndroidBinary)

  @property
  def properties_file(self):
    """Location of the key.properties file."""
    return os.path.join(get_buildroot(), self.get_option(self.KEY_PROPERTIES))

  def execute(self):
    targets = self.context.targets(self.is_signtarget)
    if not targets:
      return None
    properties_file = self.properties_file
    try:
      release_signing = KeyResolver.resolve_release(properties_file)
    except KeyResolver.Error as e:
      raise TaskError(e)

    signing_config = release_signing.signing_config
    if signing_config is None:
      if release_signing.found:
        logger.debug('No storeFile in {0}.'.format(properties_file))
      else:
        logger.info('No signing properties at {0}, release builds will not be signed with a '
                    'release key.'.format(properties_file))

    for target in targets:
      # The debug build type keeps the default signing policy of the build tool.
      target.release.signing_config = signing_config
      if signing_config is not None:
        logger.info('Signing release build of {0} with key {1!r} from keystore {2}.'
                    .format(target.name, signing_config.key_alias,
                            signing_config.store_path(target.module_dir)))
    return signing_config
