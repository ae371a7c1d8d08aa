# © 2021-2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

import io
import os
import contextlib
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import setalg.globals
from setalg import demo, logging

scenario = '1 2 3 4\n3 4 5 6\n3 4\n'
scenario_report = '''\
First set: 1 2 3 4
Second set: 3 4 5 6
Third set: 3 4
Union of the first and second set: 1 2 3 4 5 6
Difference of the first and second set: 1 2 5 6
Intersection of the first and second set: 3 4
The third set is a subset of the first.
The third set is a subset of the second.
'''

class TestDemo(unittest.TestCase):
    def setUp(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.dir = Path(tmp.name)
        self.addCleanup(logging.reset)
        env = mock.patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)
        os.environ.pop('SETALG_DEBUG', None)
        config = mock.patch.multiple(setalg.globals, int_bits=32,
                                     debug_mode=False)
        config.start()
        self.addCleanup(config.stop)

    def run_demo(self, args, stdin=''):
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch('sys.stdin', io.StringIO(stdin)), \
             contextlib.redirect_stdout(stdout), \
             contextlib.redirect_stderr(stderr):
            ret = demo.main(['setalg-demo'] + args)
        return (ret, stdout.getvalue(), stderr.getvalue())

    def write_input(self, text):
        path = self.dir / 'input.txt'
        path.write_text(text)
        return str(path)

    def test_stdin(self):
        (ret, out, err) = self.run_demo([], stdin=scenario)
        self.assertEqual(ret, 0)
        self.assertEqual(out, scenario_report)
        self.assertEqual(err, '')

    def test_input_file(self):
        (ret, out, err) = self.run_demo([self.write_input(scenario)])
        self.assertEqual((ret, out, err), (0, scenario_report, ''))

    def test_equal_and_empty_sets(self):
        (ret, out, _) = self.run_demo(['-'], stdin='1 2\n1 2\n1 2\n')
        self.assertEqual(ret, 0)
        self.assertEqual(out.splitlines()[3:],
                         ['Union of the first and second set: 1 2',
                          'Difference of the first and second set: ',
                          'Intersection of the first and second set: 1 2',
                          'The third set is a subset of the first.',
                          'The third set is a subset of the second.'])
        (ret, out, _) = self.run_demo([], stdin='\n5\n9\n')
        self.assertEqual(ret, 0)
        self.assertEqual(out.splitlines(),
                         ['First set: ',
                          'Second set: 5',
                          'Third set: 9',
                          'Union of the first and second set: 5',
                          'Difference of the first and second set: 5',
                          'Intersection of the first and second set: ',
                          'The third set is not a subset of the first.',
                          'The third set is not a subset of the second.'])

    def test_output_file(self):
        target = self.dir / 'report.txt'
        (ret, out, err) = self.run_demo(
            ['-o', str(target), self.write_input(scenario)])
        self.assertEqual((ret, out, err), (0, '', ''))
        self.assertEqual(target.read_text(), scenario_report)
        self.assertFalse(Path(str(target) + '.tmp').exists())

    def test_output_file_not_writable(self):
        target = self.dir / 'nosuchdir' / 'report.txt'
        (ret, out, err) = self.run_demo(['-o', str(target)], stdin=scenario)
        self.assertEqual(ret, 2)
        self.assertIn('error: cannot write output', err)

    def test_syntax_error(self):
        (ret, out, err) = self.run_demo([], stdin='1 2\n3 four\n5\n')
        self.assertEqual(ret, 2)
        self.assertEqual(out, '')
        self.assertEqual(
            err, "<stdin>:2:3: error: syntax error at 'four':"
            " expected an integer\n")

    def test_missing_input_file(self):
        missing = str(self.dir / 'missing.txt')
        (ret, out, err) = self.run_demo([missing])
        self.assertEqual(ret, 2)
        self.assertTrue(err.startswith(missing + ': error: cannot read input'))

    def test_input_file_not_utf8(self):
        path = self.dir / 'latin1.txt'
        path.write_bytes(b'1 2\n\xff\xfe\n3\n')
        (ret, out, err) = self.run_demo([str(path)])
        self.assertEqual((ret, out), (2, ''))
        self.assertEqual(
            err, str(path) + ': error: cannot read input:'
            ' input is not valid utf-8\n')

    def test_stdin_not_utf8(self):
        stdin = io.TextIOWrapper(io.BytesIO(b'1 2\n\xff\n3\n'),
                                 encoding='utf-8')
        stderr = io.StringIO()
        with mock.patch('sys.stdin', stdin), \
             contextlib.redirect_stderr(stderr):
            ret = demo.main(['setalg-demo'])
        self.assertEqual(ret, 2)
        self.assertEqual(stderr.getvalue(), '<stdin>: error: cannot read'
                         ' input: input is not valid utf-8\n')

    def test_too_few_lines(self):
        (ret, _, err) = self.run_demo(['-T'], stdin='1\n2\n')
        self.assertEqual(ret, 2)
        self.assertEqual(
            err, '<stdin>: error EMISSING: expected 3 input lines, found 2\n')

    def test_int_bits(self):
        (ret, _, err) = self.run_demo([], stdin='4294967296\n\n\n')
        self.assertEqual(ret, 2)
        self.assertIn('out of range for 32-bit signed integers', err)
        (ret, out, _) = self.run_demo(['--int-bits', '64'],
                                      stdin='4294967296\n\n\n')
        self.assertEqual(ret, 0)
        self.assertTrue(out.startswith('First set: 4294967296\n'))
        (ret, _, err) = self.run_demo(['--int-bits', '-1'], stdin=scenario)
        self.assertEqual(ret, 1)

    def test_huge_literal(self):
        (ret, out, err) = self.run_demo([], stdin='1' * 5000 + '\n2\n3\n')
        self.assertEqual((ret, out), (2, ''))
        self.assertEqual(
            err, "<stdin>:1:1: error: integer 11111111111111111... out of"
            " range for 32-bit signed integers\n")

    def test_warnings(self):
        dup = '1 1 2\n2\n2\n'
        # disabled by default
        (ret, out, err) = self.run_demo([], stdin=dup)
        self.assertEqual((ret, err), (0, ''))
        self.assertTrue(out.startswith('First set: 1 2\n'))
        (ret, out, err) = self.run_demo(['--warn', 'WDUPELEM', '-T'],
                                        stdin=dup)
        self.assertEqual(ret, 0)
        self.assertEqual(
            err,
            '<stdin>:1:3: warning WDUPELEM: duplicate element 1 in set 1'
            ' ignored\n')
        (ret, out, err) = self.run_demo(['--warn', 'WDUPELEM', '--werror'],
                                        stdin=dup)
        self.assertEqual(ret, 2)
        self.assertIn('warnings being treated as errors', err)
        self.assertTrue(out.startswith('First set: 1 2\n'))

    def test_extra_input(self):
        (ret, out, err) = self.run_demo([], stdin=scenario + '7 8\n')
        self.assertEqual(ret, 0)
        self.assertEqual(out, scenario_report)
        self.assertEqual(err,
                         '<stdin>:4:1: warning: ignoring input after line 3\n')
        (ret, _, err) = self.run_demo(['--nowarn', 'WEXTRA'],
                                      stdin=scenario + '7 8\n')
        self.assertEqual((ret, err), (0, ''))

    def test_bad_warning_tag(self):
        (ret, _, err) = self.run_demo(['--nowarn', 'WNOSUCH'],
                                      stdin=scenario)
        self.assertEqual(ret, 1)
        self.assertIn("the tag 'WNOSUCH' is not a valid warning tag", err)
        (ret, _, err) = self.run_demo(['--warn', 'EARG'], stdin=scenario)
        self.assertEqual(ret, 1)

    def test_help_warn(self):
        with self.assertRaises(SystemExit) as cm:
            self.run_demo(['--help-warn'])
        self.assertEqual(cm.exception.code, 0)

    def test_help_warn_lists_tags(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), \
             self.assertRaises(SystemExit):
            demo.main(['setalg-demo', '--help-warn'])
        self.assertEqual(stdout.getvalue(), '''\
Tags accepted by --warn and --nowarn:
  Enabled by default:
    WEXTRA
  Disabled by default:
    WDUPELEM
''')

    def test_unexpected_error(self):
        with mock.patch('setalg.demo.read_sets',
                        side_effect=RuntimeError('boom')):
            (ret, out, err) = self.run_demo([], stdin=scenario)
        self.assertEqual(ret, 3)
        self.assertIn("internal error: unexpected exception 'boom'", err)
        self.assertIn('SETALG_DEBUG', err)
