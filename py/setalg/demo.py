# © 2021 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Console demo: read three sets of integers and print the results of
# the set operations on them

import sys, os, traceback
import argparse

from . import logging, messages, output
import setalg.globals
from .logging import *
from .messages import *
from .output import out
from .reader import read_sets
from .set import union, intersection, difference, subset

def prerr(msg):
    sys.stderr.write(msg + "\n")

def default_warnings():
    # Ignore some warnings by default
    ignore_warning('WDUPELEM')

titles = (
    'First set: ',
    'Second set: ',
    'Third set: ',
    'Union of the first and second set: ',
    'Difference of the first and second set: ',
    'Intersection of the first and second set: ',
)

ordinals = ('first', 'second', 'third')

def print_set(title, s):
    out(title + ' '.join(map(str, s)) + '\n')

def print_subset(is_subset, ordinal):
    out('The third set %s a subset of the %s.\n'
        % ('is' if is_subset else 'is not', ordinal))

def print_report(set1, set2, set3):
    '''Print the three sets, their union, (symmetric) difference and
    intersection, and whether the third set is a subset of the other
    two, to the current output'''
    results = (set1, set2, set3,
               union(set1, set2),
               difference(set1, set2),
               intersection(set1, set2))
    for (title, s) in zip(titles, results):
        print_set(title, s)
    print_subset(subset(set3, set1), 'first')
    print_subset(subset(set3, set2), 'second')

def read_input(filename):
    '''Return the input text and the name to use for it in messages.
    When reading from a terminal, prompt for each line.'''
    if filename == '-':
        try:
            if sys.stdin.isatty():
                lines = []
                for ordinal in ordinals:
                    prerr('Enter the elements of the %s set.' % (ordinal,))
                    lines.append(sys.stdin.readline())
                return (''.join(lines), '<stdin>')
            return (sys.stdin.read(), '<stdin>')
        except UnicodeDecodeError as e:
            raise EOPEN(SimpleSite('<stdin>'),
                        'input is not valid %s' % (e.encoding,)) from e
    try:
        with open(filename, encoding='utf-8') as f:
            return (f.read(), filename)
    except OSError as e:
        raise EOPEN(SimpleSite(filename), e.strerror) from e
    except UnicodeDecodeError as e:
        raise EOPEN(SimpleSite(filename),
                    'input is not valid %s' % (e.encoding,)) from e

def unexpected_error(exc_type, exc_value, exc_traceback):
    if setalg.globals.debug_mode:
        traceback.print_exception(exc_type, exc_value, exc_traceback)
    report(ICE(None, "unexpected exception '%s'" % (exc_value,)))
    prerr("*** An unexpected setalg error occurred!")
    if not setalg.globals.debug_mode:
        prerr("    Set SETALG_DEBUG=1 to get a traceback.")

class HelpAction(argparse.Action):
    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        self.print_help()
        parser.exit()

class WarnHelpAction(HelpAction):
    def print_help(self):
        print('''Tags accepted by --warn and --nowarn:''')
        by_ignored = {True: [], False: []}
        for tag in sorted(messages.warnings):
            by_ignored[warning_is_ignored(tag)].append(tag)
        print('  Enabled by default:')
        for tag in by_ignored[False]:
            print(f'    {tag}')
        print('  Disabled by default:')
        for tag in by_ignored[True]:
            print(f'    {tag}')

def main(argv):
    logging.reset()
    default_warnings()
    setalg.globals.debug_mode = bool(os.getenv('SETALG_DEBUG'))

    parser = argparse.ArgumentParser(
        prog='setalg-demo',
        description='Read three lines of integers and print the union,'
        ' difference and intersection of the first two sets, and whether'
        ' the third set is a subset of each of them.')

    parser.add_argument(
        'input', nargs='?', default='-', metavar='INPUT',
        help="file with one line of integers per set; '-' (the default)"
        " reads standard input")

    parser.add_argument(
        '-o', dest='output', metavar='FILE',
        help='write the report to FILE instead of standard output')

    parser.add_argument(
        '-T', dest='include_tag', action='store_true',
        help='show tags on warning messages')

    parser.add_argument(
        '--warn', dest='enabled_warnings', action='append',
        metavar='TAG',
        default=[],
        help='enable warning TAG')

    parser.add_argument(
        '--nowarn', dest='disabled_warnings', action='append',
        metavar='TAG',
        default=[],
        help='disable warning TAG')

    parser.add_argument('--help-warn', action=WarnHelpAction,
                        help='List warning tags available for --warn/--nowarn')

    parser.add_argument('--werror', action='store_true',
                        help='Turn all warnings into errors')

    parser.add_argument(
        '--int-bits', type=int, default=32, metavar='N',
        help='accept signed integers of N bits (default 32); 0 accepts'
        ' integers of any size')

    options = parser.parse_args(argv[1:])

    if options.include_tag:
        set_include_tag(True)

    if options.werror:
        SetWarning.enable_werror()

    if options.int_bits < 0:
        prerr("setalg: Expected non-negative integer for --int-bits, got %d"
              % (options.int_bits,))
        return 1
    setalg.globals.int_bits = options.int_bits

    for w in options.disabled_warnings:
        if not is_warning_tag(w):
            prerr("setalg: the tag '%s' is not a valid warning tag" % w)
            return 1
        ignore_warning(w)

    for w in options.enabled_warnings:
        if not is_warning_tag(w):
            prerr("setalg: the tag '%s' is not a valid warning tag" % w)
            return 1
        enable_warning(w)

    try:
        (text, name) = read_input(options.input)
        (set1, set2, set3) = read_sets(text, name)

        if options.output:
            try:
                f = output.FileOutput(options.output)
            except OSError as e:
                raise EWRITE(SimpleSite(options.output), e.strerror) from e
        else:
            f = output.StreamOutput()
        try:
            with f:
                print_report(set1, set2, set3)
        except BaseException:
            if options.output:
                f.abort()
            raise
        if options.output:
            f.close()
            f.commit()

        return 2 if logging.failure else 0

    except SetError as msg:
        report(msg)
        return 2

    except KeyboardInterrupt:
        prerr('*** Keyboard interrupt')
        return 3

    except Exception:
        unexpected_error(*sys.exc_info())
        return 3

def run():
    sys.exit(main(sys.argv))

if __name__ == '__main__':
    run()
