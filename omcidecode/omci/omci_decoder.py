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
"""
OMCI frame decoder

Splits a frame into header, content and trailer, selects the content
layout from the message type and the AR / AK flags and produces a decode
tree plus a one line summary of the frame.
"""
import struct
from binascii import hexlify
from collections import namedtuple

import structlog

from omcidecode.omci.decode_tree import DecodeField, OmciDiagnostic
from omcidecode.omci.omci_alarms import decode_alarm_notification
from omcidecode.omci.omci_defs import OmciMessageType, DiagnosticType, \
    OmciTruncatedFrameError, OmciHeaderSize, OmciContentSize, OmciTrailerSize, \
    ReservedMessageTypeName, UnknownResultCodeName, lookup_message_type, \
    lookup_result_code
from omcidecode.omci.omci_entities import lookup_class
from omcidecode.omci.omci_frame import OmciFrame
from omcidecode.omci.omci_messages import decode_masked_attributes, \
    decode_create_attributes, attribute_mask_bits
from omcidecode.omci.omci_tests import decode_test_request, decode_test_result

# Message type column width of the summary line
SummaryColumnWidth = 30

DecodedContent = namedtuple('DecodedContent', 'tree attributes')


def _hex(data):
    return hexlify(data).decode('ascii')


class OmciDecodeResult(object):
    """
    Outcome of decoding one frame

    :param frame: (OmciFrame) the frame split into its parts
    :param tree: (DecodeField) root of the decode tree
    :param attributes: (list) DecodedAttribute rows found in the content
    :param summary: (str) one line description of the frame
    """
    def __init__(self, frame, tree, attributes, summary):
        self.frame = frame
        self.tree = tree
        self.attributes = attributes
        self.summary = summary
        self.diagnostics = tree.diagnostics()

    def __str__(self):
        return '\n'.join([self.summary] + self.tree.render())

    def to_dict(self):
        return {
            'summary': self.summary,
            'tree': self.tree.to_dict(),
            'attributes': [attr.to_dict() for attr in self.attributes],
            'diagnostics': [diag.to_dict() for diag in self.diagnostics]
        }


class OmciDecoder(object):
    """
    Stateless OMCI frame decoder, a single instance can be shared freely
    """
    def __init__(self):
        self.log = structlog.get_logger()

        _mt = OmciMessageType
        self._content_decoders = {
            # (message type, AR, AK) -> content layout
            (_mt.Get, 1, 0): self._decode_masked_request,
            (_mt.GetCurrentData, 1, 0): self._decode_masked_request,
            (_mt.Get, 0, 1): self._decode_get_response,
            (_mt.GetCurrentData, 0, 1): self._decode_get_response,
            (_mt.Set, 1, 0): self._decode_masked_request,
            (_mt.Set, 0, 1): self._decode_result,
            (_mt.Create, 0, 1): self._decode_result,
            (_mt.MibReset, 0, 1): self._decode_result,
            (_mt.Test, 0, 1): self._decode_result,
            (_mt.Create, 1, 0): self._decode_create_request,
            (_mt.MibUpload, 0, 1): self._decode_mib_upload_response,
            (_mt.MibUploadNext, 1, 0): self._decode_mib_upload_next_request,
            (_mt.MibUploadNext, 0, 1): self._decode_mib_upload_next_response,
            (_mt.Test, 1, 0): self._decode_test_request,
            (_mt.TestResult, 0, 0): self._decode_test_result,
            (_mt.AlarmNotification, 0, 0): self._decode_alarm_notification,
        }

    def decode(self, buffer, frame_length=None, device_id=None):
        """
        Decode a single OMCI frame

        :param buffer: (bytes) frame octets
        :param frame_length: (int) on-wire frame length, defaults to the
                             buffer length. Decides whether a trailer follows
                             the content
        :param device_id: (int) device identifier hint for the Test request
                          layout, defaults to the header device identifier
        :return: (OmciDecodeResult)
        :raises OmciTruncatedFrameError: buffer too short for the frame
        """
        frame = OmciFrame.from_bytes(buffer, frame_length)
        header = frame.header
        entity_class = lookup_class(header.entity_class)

        root = DecodeField('ONU Management and Control Interface', offset=0,
                           length=len(bytes(frame)))
        self._add_header(root, header, entity_class)

        decoded = self.decode_content(header, frame.content, device_id)
        root.append(decoded.tree)

        if frame.trailer is not None:
            self._add_trailer(root, frame.trailer)
        elif frame.partial_trailer is not None:
            self._add_partial_trailer(root, frame.partial_trailer)

        summary = self.summary(header, entity_class)
        self.log.debug('frame-decoded', transaction_id=header.transaction_id,
                       summary=summary)
        return OmciDecodeResult(frame, root, decoded.attributes, summary)

    def decode_content(self, header, content, device_id=None):
        """
        Decode the 32 octet message content according to the message type
        and the AR / AK flags of the header. Combinations without a known
        layout produce an opaque content node with an unimplemented-shape
        diagnostic.

        :param header: (OmciHeader) decoded message header
        :param content: (bytes) 32 octet message content
        :param device_id: (int) device identifier hint, defaults to the
                          header device identifier
        :return: (DecodedContent) content tree and attribute rows
        :raises OmciTruncatedFrameError: content is not 32 octets long
        """
        if len(content) != OmciContentSize:
            raise OmciTruncatedFrameError(
                'OMCI content requires {} octets, got {}'.format(
                    OmciContentSize, len(content)))
        if device_id is None:
            device_id = header.device_id

        entity_class = lookup_class(header.entity_class)
        node = DecodeField('Message Content', offset=OmciHeaderSize,
                           length=OmciContentSize, raw=content)

        key = (header.message_type, header.ar, header.ak)
        decoder = self._content_decoders.get(key)
        if decoder is None:
            message = 'No content layout for {} (AR={}, AK={})'.format(
                lookup_message_type(header.message_type), header.ar,
                header.ak)
            self.log.debug('unimplemented-shape', message_type=key[0],
                           ar=header.ar, ak=header.ak)
            node.diagnostic = OmciDiagnostic(DiagnosticType.UnimplementedShape,
                                             message, OmciHeaderSize)
            return DecodedContent(node, [])

        attributes = decoder(node, entity_class, content, device_id)
        return DecodedContent(node, attributes)

    @staticmethod
    def summary(header, entity_class):
        """One line description, message type padded to a fixed column"""
        name = lookup_message_type(header.message_type)
        if header.ar:
            name = 'OLT> ' + name
        if header.ak:
            name = 'ONU< ' + name + ' response'

        return '{} - {}'.format(name.ljust(SummaryColumnWidth),
                                entity_class.name)

    # Header and trailer

    def _add_header(self, root, header, entity_class):
        raw = bytes(header)

        root.add('Transaction Correlation Identifier: 0x{:04x}'.format(
                 header.transaction_id), offset=0, length=2, raw=raw[0:2],
                 value=header.transaction_id)

        type_name = lookup_message_type(header.message_type)
        diagnostic = None
        if type_name == ReservedMessageTypeName:
            diagnostic = OmciDiagnostic(
                DiagnosticType.UnknownMessageType,
                'Message type {} is reserved'.format(header.message_type), 2)

        msg_type = root.add('Message Type = ' + type_name, offset=2,
                            length=1, raw=raw[2:3], diagnostic=diagnostic)
        msg_type.add('DB: {}'.format(header.db), offset=2, length=1,
                     value=header.db)
        msg_type.add('AR: {}'.format(header.ar), offset=2, length=1,
                     value=header.ar)
        msg_type.add('AK: {}'.format(header.ak), offset=2, length=1,
                     value=header.ak)
        msg_type.add('Message Type: {} ({})'.format(type_name,
                                                    header.message_type),
                     offset=2, length=1, value=header.message_type)

        root.add('Device Identifier: 0x{:02x}'.format(header.device_id),
                 offset=3, length=1, raw=raw[3:4], value=header.device_id)

        identifier = root.add(
            'Message Identifier, ME Class = {}, Instance = 0x{:04x}'.format(
                entity_class.name, header.entity_id),
            offset=4, length=4, raw=raw[4:8])
        identifier.add(
            'Managed Entity Class: {} ({})'.format(entity_class.name,
                                                   header.entity_class),
            offset=4, length=2, raw=raw[4:6], value=header.entity_class,
            diagnostic=self._unknown_class(entity_class, 4))
        identifier.add('Managed Entity Instance: 0x{:04x}'.format(
                       header.entity_id), offset=6, length=2, raw=raw[6:8],
                       value=header.entity_id)

    @staticmethod
    def _add_trailer(root, trailer):
        offset = OmciHeaderSize + OmciContentSize
        raw = bytes(trailer)
        node = root.add('Trailer', offset=offset, length=len(raw), raw=raw)
        node.add('CPCS-UU and CPI: 0x{:04x}'.format(trailer.cpcs_uu_cpi),
                 offset=offset, length=2, raw=raw[0:2],
                 value=trailer.cpcs_uu_cpi)
        node.add('CPCS-SDU Length: 0x{:04x}'.format(trailer.cpcs_sdu_length),
                 offset=offset + 2, length=2, raw=raw[2:4],
                 value=trailer.cpcs_sdu_length)
        node.add('CRC32: 0x{:08x}'.format(trailer.crc32),
                 offset=offset + 4, length=4, raw=raw[4:8],
                 value=trailer.crc32)

    @staticmethod
    def _add_partial_trailer(root, raw):
        offset = OmciHeaderSize + OmciContentSize
        diagnostic = OmciDiagnostic(
            DiagnosticType.TruncatedTrailer,
            'Trailer requires {} octets, got {}'.format(OmciTrailerSize,
                                                        len(raw)),
            offset)
        root.add('Trailer (truncated)', offset=offset, length=len(raw),
                 raw=raw, diagnostic=diagnostic)

    @staticmethod
    def _unknown_class(entity_class, offset):
        if not entity_class.placeholder:
            return None
        return OmciDiagnostic(
            DiagnosticType.UnknownClass,
            'ME class {} is not defined: {}'.format(entity_class.class_id,
                                                    entity_class.name),
            offset)

    # Content building blocks

    @staticmethod
    def _add_result(node, content):
        code = content[0]
        name = lookup_result_code(code)
        diagnostic = None
        if name == UnknownResultCodeName:
            diagnostic = OmciDiagnostic(
                DiagnosticType.UnknownResultCode,
                'Result code {} is not defined'.format(code), OmciHeaderSize)
        node.add('Result: {} (0x{:02x})'.format(name, code),
                 offset=OmciHeaderSize, length=1, raw=content[0:1],
                 value=code, diagnostic=diagnostic)

    @staticmethod
    def _add_attribute_mask(node, content, offset):
        mask, = struct.unpack('>H', content[offset:offset + 2])
        mask_node = node.add('Attribute Mask (0x{:04x})'.format(mask),
                             offset=OmciHeaderSize + offset, length=2,
                             raw=content[offset:offset + 2], value=mask)
        mask_node.add(attribute_mask_bits(mask), offset=OmciHeaderSize + offset,
                      length=2)
        return mask

    @staticmethod
    def _add_attribute_list(node, attributes):
        attr_list = node.add('Attribute List', offset=OmciHeaderSize,
                             length=OmciContentSize)
        for attr in attributes:
            diagnostic = None
            if attr.truncated:
                diagnostic = OmciDiagnostic(
                    DiagnosticType.AttributeOverrun,
                    'Attribute {:02d} ({}) of {} octets at content offset {} '
                    'runs past the message content'.format(
                        attr.index, attr.name, attr.length, attr.offset),
                    OmciHeaderSize + attr.offset)
            attr_list.add('{:02d}: {} ({})'.format(attr.index, attr.name,
                                                   _hex(attr.raw)),
                          offset=OmciHeaderSize + attr.offset,
                          length=len(attr.raw), raw=attr.raw,
                          value=_hex(attr.raw), diagnostic=diagnostic)

    # Content layouts

    def _decode_masked_request(self, node, entity_class, content, device_id):
        mask = self._add_attribute_mask(node, content, 0)
        attributes = decode_masked_attributes(content, entity_class, mask, 2)
        self._add_attribute_list(node, attributes)
        return attributes

    def _decode_get_response(self, node, entity_class, content, device_id):
        self._add_result(node, content)
        mask = self._add_attribute_mask(node, content, 1)
        attributes = decode_masked_attributes(content, entity_class, mask, 3)
        self._add_attribute_list(node, attributes)
        return attributes

    def _decode_result(self, node, entity_class, content, device_id):
        self._add_result(node, content)
        return []

    def _decode_create_request(self, node, entity_class, content, device_id):
        attributes = decode_create_attributes(content, entity_class)
        self._add_attribute_list(node, attributes)
        return attributes

    def _decode_mib_upload_response(self, node, entity_class, content,
                                    device_id):
        count, = struct.unpack('>H', content[0:2])
        node.add('Number of subsequent commands: {} (0x{:04x})'.format(
                 count, count), offset=OmciHeaderSize, length=2,
                 raw=content[0:2], value=count)
        return []

    def _decode_mib_upload_next_request(self, node, entity_class, content,
                                        device_id):
        number, = struct.unpack('>H', content[0:2])
        node.add('Command number: {} (0x{:04x})'.format(number, number),
                 offset=OmciHeaderSize, length=2, raw=content[0:2],
                 value=number)
        return []

    def _decode_mib_upload_next_response(self, node, entity_class, content,
                                         device_id):
        class_id, instance = struct.unpack('>HH', content[0:4])
        nested_class = lookup_class(class_id)

        upload = node.add('ME Class Upload Content', offset=OmciHeaderSize,
                          length=OmciContentSize, raw=content)
        upload.add('Managed Entity Class: {} ({})'.format(nested_class.name,
                                                          class_id),
                   offset=OmciHeaderSize, length=2, raw=content[0:2],
                   value=class_id,
                   diagnostic=self._unknown_class(nested_class,
                                                  OmciHeaderSize))
        upload.add('Managed Entity Instance: {} (0x{:04x})'.format(
                   instance, instance), offset=OmciHeaderSize + 2, length=2,
                   raw=content[2:4], value=instance)

        mask = self._add_attribute_mask(upload, content, 4)
        attributes = decode_masked_attributes(content, nested_class, mask, 6)
        self._add_attribute_list(upload, attributes)
        return attributes

    def _decode_test_request(self, node, entity_class, content, device_id):
        for field in decode_test_request(content, entity_class, device_id,
                                         OmciHeaderSize):
            node.append(field)
        return []

    def _decode_test_result(self, node, entity_class, content, device_id):
        node.append(decode_test_result(content, entity_class, OmciHeaderSize))
        return []

    def _decode_alarm_notification(self, node, entity_class, content,
                                   device_id):
        node.append(decode_alarm_notification(content, entity_class,
                                              OmciHeaderSize))
        return []


_decoder = OmciDecoder()


def decode_frame(buffer, frame_length=None, device_id=None):
    """Decode a single OMCI frame with a shared decoder, see OmciDecoder"""
    return _decoder.decode(buffer, frame_length, device_id)
