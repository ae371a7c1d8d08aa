# © 2021 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

import os
import sys
from pathlib import Path

__all__ = (
    'FileOutput',
    'StrOutput',
    'StreamOutput',
    'out',
)


class Output(object):
    outwrite_stack = []

    filename = None

    def write(self, s):
        assert False

    def __enter__(self):
        self.outwrite_stack.append(self)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        top = self.outwrite_stack.pop(-1)
        assert top is self

    def out(self, output):
        if output:
            self.write(output)

class StreamOutput(Output):
    '''Output to an already open text stream, stdout by default'''
    def __init__(self, stream=None):
        self.stream = stream

    def write(self, s):
        (self.stream or sys.stdout).write(s)

class FileOutput(Output):
    '''Output to a file. Text is written to a temporary file, which
    replaces the target file on commit()'''
    def __init__(self, filename):
        self.filename = str(Path(filename).resolve())
        self.__file = open(self.filename + ".tmp", "w")
        self.write = self.__file.write

    def close(self):
        self.__file.close()

    def abort(self):
        self.__file.close()
        os.remove(self.filename + '.tmp')

    def commit(self):
        try:
            os.remove(self.filename)
        except OSError:
            pass
        os.rename(self.filename+'.tmp', self.filename)

class StrOutput(Output):
    def __init__(self):
        self.buf = ''

    def write(self, s):
        self.buf += s

def out(output = ''):
    Output.outwrite_stack[-1].out(output)
