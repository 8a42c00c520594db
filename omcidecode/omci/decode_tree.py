#
# Copyright 2017 the original author or authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
from binascii import hexlify


class OmciDiagnostic(object):
    """
    Non-fatal finding made while decoding a frame

    :param kind: (DiagnosticType) category of the finding
    :param message: (str) human readable description
    :param offset: (int) absolute frame offset the finding refers to, if any
    """
    def __init__(self, kind, message, offset=None):
        self.kind = kind
        self.message = message
        self.offset = offset

    def __str__(self):
        if self.offset is None:
            return '{}: {}'.format(self.kind.value, self.message)
        return '{} @{}: {}'.format(self.kind.value, self.offset, self.message)

    def __repr__(self):
        return 'OmciDiagnostic({}, {!r}, offset={})'.format(
            self.kind, self.message, self.offset)

    def to_dict(self):
        return {
            'kind': self.kind.value,
            'message': self.message,
            'offset': self.offset
        }


class DecodeField(object):
    """
    Node of a decode tree. A node is either a labelled scalar (raw octets
    plus an interpreted value) or a labelled group of child nodes.
    """
    def __init__(self, label, offset=None, length=None, raw=None, value=None,
                 diagnostic=None):
        self.label = label
        self.offset = offset
        self.length = length
        self.raw = raw
        self.value = value
        self.diagnostic = diagnostic
        self.children = []

    def __repr__(self):
        return 'DecodeField({!r}, offset={}, length={})'.format(
            self.label, self.offset, self.length)

    def add(self, label, offset=None, length=None, raw=None, value=None,
            diagnostic=None):
        child = DecodeField(label, offset=offset, length=length, raw=raw,
                            value=value, diagnostic=diagnostic)
        self.children.append(child)
        return child

    def append(self, child):
        self.children.append(child)
        return child

    def walk(self):
        """Depth first, pre-order iteration over this node and its children"""
        yield self
        for child in self.children:
            for node in child.walk():
                yield node

    def find(self, prefix):
        """First node in the tree whose label starts with prefix, or None"""
        for node in self.walk():
            if node.label.startswith(prefix):
                return node
        return None

    def diagnostics(self):
        return [node.diagnostic for node in self.walk()
                if node.diagnostic is not None]

    def to_dict(self):
        data = {'label': self.label}
        if self.offset is not None:
            data['offset'] = self.offset
        if self.length is not None:
            data['length'] = self.length
        if self.raw is not None:
            data['raw'] = hexlify(self.raw).decode('ascii')
        if self.value is not None:
            data['value'] = self.value
        if self.diagnostic is not None:
            data['diagnostic'] = self.diagnostic.to_dict()
        if self.children:
            data['children'] = [child.to_dict() for child in self.children]
        return data

    def render(self, indent=0, indent_with='    '):
        """Indented text rendering, one line per node"""
        line = indent_with * indent + self.label
        if self.diagnostic is not None:
            line += '  [{}]'.format(self.diagnostic.kind.value)
        lines = [line]
        for child in self.children:
            lines.extend(child.render(indent + 1, indent_with))
        return lines
