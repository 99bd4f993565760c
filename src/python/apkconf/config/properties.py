# coding=utf-8
# Copyright 2015 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import logging
import re
import string

from apkconf.config.config import ConfigError


logger = logging.getLogger(__name__)


class Properties(object):
  """Reads .properties files with the line and escape rules of java.util.Properties.

  Each logical line holds a key and a value split by the first unescaped '=', ':' or run of
  whitespace. Lines whose first non-whitespace character is '#' or '!' are comments. A line ending
  in an odd number of backslashes continues on the next line. Leading whitespace of every line is
  dropped, trailing whitespace of a value is kept. Backslash escapes are decoded in keys and values.
  Keys are case sensitive and the last definition of a duplicated key wins.
  """

  class Error(ConfigError):
    """Indicates a properties file that could not be read or parsed."""

  _WHITESPACE = ' \t\f'
  _SEPARATORS = '=:'
  _COMMENTS = '#!'
  _ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
  _NEWLINE = re.compile(r'\r\n|\r|\n')

  @classmethod
  def loads(cls, content, source='<string>'):
    """Parse the text of a properties file and return its pairs as a dict."""
    properties = {}
    for number, line in cls._logical_lines(content):
      key, value = cls._split(line)
      properties[cls._unescape(key, source, number)] = cls._unescape(value, source, number)
    return properties

  @classmethod
  def load(cls, path):
    """Read the properties file at `path` and return its pairs as a dict."""
    try:
      with open(path, 'r', encoding='utf-8') as fp:
        content = fp.read()
    except (OSError, UnicodeDecodeError) as e:
      raise cls.Error('Failed to read properties file {0}: {1}'.format(path, e))
    properties = cls.loads(content, source=path)
    logger.debug('Read {0} properties from {1}'.format(len(properties), path))
    return properties

  @classmethod
  def _logical_lines(cls, content):
    """Yield (line number, text) for each logical line, with continuations joined."""
    logical = None
    start = None
    for number, line in enumerate(cls._NEWLINE.split(content), 1):
      line = line.lstrip(cls._WHITESPACE)
      if logical is None:
        if not line or line[0] in cls._COMMENTS:
          continue
        logical, start = line, number
      else:
        logical += line
      if cls._continues(logical):
        logical = logical[:-1]
      else:
        yield start, logical
        logical = None
    if logical:
      yield start, logical

  @staticmethod
  def _continues(line):
    trailing = len(line) - len(line.rstrip('\\'))
    return trailing % 2 == 1

  @classmethod
  def _split(cls, line):
    """Split a logical line into its raw key and value."""
    index = 0
    while index < len(line):
      char = line[index]
      if char == '\\':
        index += 2
        continue
      if char in cls._SEPARATORS or char in cls._WHITESPACE:
        break
      index += 1
    key = line[:index]
    value = line[index:].lstrip(cls._WHITESPACE)
    if value and value[0] in cls._SEPARATORS:
      value = value[1:].lstrip(cls._WHITESPACE)
    return key, value

  @classmethod
  def _unescape(cls, text, source, number):
    if '\\' not in text:
      return text
    chars = []
    index = 0
    while index < len(text):
      char = text[index]
      index += 1
      if char != '\\':
        chars.append(char)
        continue
      if index == len(text):
        break
      char = text[index]
      index += 1
      if char == 'u':
        digits = text[index:index + 4]
        if len(digits) != 4 or any(digit not in string.hexdigits for digit in digits):
          raise cls.Error('Failed to parse properties from {0} [line {1}]: malformed \\uxxxx '
                          'encoding.'.format(source, number))
        chars.append(chr(int(digits, 16)))
        index += 4
      else:
        chars.append(cls._ESCAPES.get(char, char))
    # Recombine surrogate pairs written as two \uxxxx escapes.
    return ''.join(chars).encode('utf-16', 'surrogatepass').decode('utf-16', 'surrogatepass')
