# © 2021 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# This module handles errors and warnings

__all__ = (
    'report',
    'ICE',
    'SetError',
    'SetWarning',

    'is_warning_tag',
    'ignore_warning',
    'warning_is_ignored',
    'enable_warning',
    'set_include_tag',

    'FileInfo',
    'Site',
    'SimpleSite',
    'DumpableSite',
    )

import sys
import bisect
import abc
from itertools import accumulate

# Number of errors reported so far
failure = 0

# Include warning and error ID's in reports
include_tag = False
def set_include_tag(val):
    global include_tag
    include_tag = val

def is_warning_tag(tag):
    from . import messages
    cls = getattr(messages, tag, None)
    return isinstance(cls, type) and issubclass(cls, SetWarning)

# A set of ignored warnings
ignored_warnings = {}
def ignore_warning(tag):
    ignored_warnings[tag] = True

def enable_warning(tag):
    ignored_warnings[tag] = False

def warning_is_ignored(tag):
    return ignored_warnings.get(tag, False)

def report_error():
    global failure
    failure += 1

def reset():
    '''Forget reported errors and warning settings'''
    global failure
    failure = 0
    ignored_warnings.clear()
    set_include_tag(False)
    SetWarning.werror = False
    SetWarning.werror_announced = False

# Messages
#
# There are three kinds of messages: errors, warnings and internal
# errors. All messages are represented as instances of LogMessage,
# or one of its subclasses.
#
class LogMessage(object):
    # The kind is for example 'error' or 'warning'.
    kind = None

    # None means the current sys.stderr
    outfile = None

    def __init__(self, site, *msgargs):
        # The site is the place in the input that this message refers
        # to, or None for messages raised by the Set operations.
        assert site is None or isinstance(site, Site)
        self.site = site
        self.msg = self.fmt % msgargs

    # This is a utility method that prints a message prefixed with a
    # site indicator.  The msg should be a string without line breaks
    def print_site_message(self, site, msg):
        loc = site.loc() if site else "setalg"
        (self.outfile or sys.stderr).write("%s: %s\n" % (loc, msg))

    def tag(self):
        return self.__class__.__name__

    def preprocess(self):
        '''Call before log when reporting. Return True to actually log
        or False to abort'''
        return True

    def log(self):
        lines = self.msg.splitlines() or ['']
        tag = ' ' + self.tag() if include_tag else ''
        self.print_site_message(self.site,
                                '%s%s: %s' % (self.kind, tag, lines[0]))
        for l in lines[1:]:
            self.print_site_message(self.site, '  ' + l)

    def postprocess(self):
        pass

# This is a base class for internal errors
#
class ICE(Exception, LogMessage):
    kind = "internal error"
    fmt = "%s"
    def __init__(self, site, msg):
        LogMessage.__init__(self, site, msg)
        Exception.__init__(self, msg)

# This is a base class for warning messages
#
class SetWarning(LogMessage):
    kind = "warning"
    # Set by --werror: every reported warning counts as an error
    werror = False
    werror_announced = False

    def preprocess(self):
        # Don't print anything if the user asked us not to
        if warning_is_ignored(self.tag()):
            return False
        if SetWarning.werror and not SetWarning.werror_announced:
            self.print_site_message(self.site,
                                    'setalg: warnings being treated as errors')
            SetWarning.werror_announced = True
        return True

    @classmethod
    def enable_werror(cls):
        cls.werror = True

    def postprocess(self):
        if SetWarning.werror:
            report_error()

# This is a base class for error messages
#
class SetError(Exception, LogMessage):
    kind = "error"

    def __init__(self, site, *msgargs):
        LogMessage.__init__(self, site, *msgargs)
        if site:
            Exception.__init__(self, "%s: %s" % (site.loc(), self.msg))
        else:
            Exception.__init__(self, self.msg)

    def postprocess(self):
        report_error()

class Site(metaclass=abc.ABCMeta):
    __slots__ = ()
    @abc.abstractmethod
    def loc(self): pass
    @abc.abstractmethod
    def filename(self): pass
    @property
    @abc.abstractmethod
    def lineno(self): pass

class SimpleSite(Site):
    '''A variant of Site without column information, for things like
    the command line or a file that could not be opened'''
    __slots__ = ('_name', '_lineno')
    def __init__(self, name, lineno=None):
        self._name = name
        self._lineno = lineno
    def __repr__(self):
        return '<site %s>' % (self.loc(),)
    def loc(self):
        if self._lineno is None:
            return self._name
        return '%s:%d' % (self._name, self._lineno)
    def filename(self):
        return self._name
    @property
    def lineno(self):
        return self._lineno

class FileInfo(object):
    '''Global information about an input file. All sites of tokens
    lexed from the same input share one FileInfo instance.'''
    __slots__ = ('name', '_line_offsets')
    def __init__(self, name, content_lines):
        self.name = str(name)
        # line_offset[i] is the zero-based offset of line i+1
        self._line_offsets = [0] + list(
            accumulate(len(line) for line in content_lines))
    def loc_from_offset(self, offset):
        '''Calculate a file location as a (line, col) pair'''
        line = bisect.bisect_right(self._line_offsets, offset) - 1
        col = offset - self._line_offsets[line]
        return (line + 1, col + 1)
    def size(self):
        return self._line_offsets[-1]

class DumpableSite(Site):
    '''A location in an input file'''
    __slots__ = ('file_info', '_offs')
    def __init__(self, file_info, fileoffs):
        self.file_info = file_info
        self._offs = fileoffs
    def __repr__(self):
        return '<site %s>' % self.loc()
    def filename(self):
        return self.file_info.name
    @property
    def lineno(self):
        (line, col) = self.file_info.loc_from_offset(self._offs)
        return line
    def loc(self):
        (line, col) = self.file_info.loc_from_offset(self._offs)
        return "%s:%d:%d" % (self.filename(), line, col)

def report(logmessage):
    if logmessage.preprocess():
        logmessage.log()
        logmessage.postprocess()
