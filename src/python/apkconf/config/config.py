# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import configparser
import logging
import os

from apkconf.base.build_environment import get_buildroot


logger = logging.getLogger(__name__)


class ConfigError(Exception):
  """Indicates a missing, empty or unparseable configuration value."""


class Config(object):
  """Encapsulates ini-style config file loading and access.

  Values are looked up in each loaded file in turn, so files loaded later act as fallbacks for
  files loaded earlier. Supports the interpolation defaults ``buildroot`` and ``homedir``.
  """

  @staticmethod
  def default_config_path():
    return os.path.join(get_buildroot(), 'apkconf.ini')

  @classmethod
  def create_parser(cls, defaults=None, **kwargs):
    """Create a config parser that supports %([key-name])s value substitution.

    Keys are case sensitive. A few defaults are pre-populated and available for interpolation:
      homedir: the current user's home directory
      buildroot: the root of this repo

    :param dict defaults: Additional defaults to make available for interpolation.
    :param kwargs: Passed through to ``configparser.ConfigParser``.
    """
    standard_defaults = dict(
      homedir=os.path.expanduser('~'),
      buildroot=get_buildroot(),
    )
    if defaults:
      standard_defaults.update(defaults)
    parser = configparser.ConfigParser(defaults=standard_defaults, **kwargs)
    parser.optionxform = str
    return parser

  @classmethod
  def load(cls, configpaths=None):
    """Loads config from the given paths, or the default `apkconf.ini` at the build root.

    Missing files are skipped.
    """
    if configpaths is None:
      configpaths = [cls.default_config_path()]
    single_file_configs = []
    for configpath in configpaths:
      parser = cls.create_parser()
      if os.path.exists(configpath):
        with open(configpath, 'r') as ini:
          try:
            parser.read_file(ini)
          except configparser.Error as e:
            raise ConfigError('Failed to parse {0}: {1}'.format(configpath, e))
        logger.debug('Loaded config from {0}'.format(configpath))
      single_file_configs.append(SingleFileConfig(configpath, parser))
    return ChainedConfig(single_file_configs)

  def get_option(self, option):
    """Return the value of a ``ConfigOption``, cast to its type, or its default if undefined."""
    if self.has_option(option.section, option.option):
      return self.get(option.section, option.option, type=option.valtype)
    return option.default

  def get(self, section, option, type=str, default=None):
    """Retrieves option from the specified section and attempts to parse it as type.

    If the specified section does not exist or is missing a definition for the option, the value
    is looked up in the DEFAULT section. If there is still no definition found, the default value
    supplied is returned.
    """
    return self._getinstance(section, option, type, default=default)

  def get_required(self, section, option, type=str):
    """Retrieves option from the specified section and attempts to parse it as type.

    If the specified section is missing a definition for the option, the value is looked up in the
    DEFAULT section. If there is still no definition found, a `ConfigError` is raised.
    """
    val = self.get(section, option, type=type)
    # Empty str catches blank options. If blank entries are ok, use get(..., default='') instead.
    if val is None or val == '':
      raise ConfigError('Required option {0}.{1} is not defined.'.format(section, option))
    return val

  def _getinstance(self, section, option, type, default=None):
    if not self.has_option(section, option):
      return default
    raw_value = self.get_value(section, option)
    if issubclass(type, str):
      return raw_value
    if type is bool:
      if raw_value.lower() in ('true', 'yes', 'on', '1'):
        return True
      if raw_value.lower() in ('false', 'no', 'off', '0'):
        return False
    else:
      try:
        return type(raw_value)
      except ValueError:
        pass
    raise ConfigError('No valid {0} for {1}.{2}: {3}'.format(type.__name__, section, option,
                                                              raw_value))

  def sources(self):
    """Return the sources of this config as a list of filenames."""
    raise NotImplementedError()

  def has_section(self, section):
    raise NotImplementedError()

  def has_option(self, section, option):
    raise NotImplementedError()

  def get_value(self, section, option):
    raise NotImplementedError()


class SingleFileConfig(Config):
  """Config read from a single file."""

  def __init__(self, configpath, configparser):
    super(SingleFileConfig, self).__init__()
    self.configpath = configpath
    self.configparser = configparser

  def sources(self):
    return [self.configpath]

  def has_section(self, section):
    return self.configparser.has_section(section)

  def has_option(self, section, option):
    return self.configparser.has_option(section, option)

  def get_value(self, section, option):
    try:
      return self.configparser.get(section, option)
    except configparser.InterpolationError as e:
      raise ConfigError('Failed to interpolate {0}.{1} in {2}: {3}'
                        .format(section, option, self.configpath, e))


class ChainedConfig(Config):
  """Config read from multiple sources, earlier sources taking precedence."""

  def __init__(self, configs):
    super(ChainedConfig, self).__init__()
    self.configs = list(configs)

  def sources(self):
    ret = []
    for config in self.configs:
      ret.extend(config.sources())
    return ret

  def has_section(self, section):
    return any(config.has_section(section) for config in self.configs)

  def has_option(self, section, option):
    return any(config.has_option(section, option) for config in self.configs)

  def get_value(self, section, option):
    for config in self.configs:
      if config.has_option(section, option):
        return config.get_value(section, option)
    raise configparser.NoOptionError(option, section)
