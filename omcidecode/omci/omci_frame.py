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
import structlog
from scapy.fields import BitField, BitEnumField, ShortField, XByteField
from scapy.fields import XShortField, XIntField
from scapy.packet import Packet

from omcidecode.omci.omci_defs import OmciTruncatedFrameError, \
    OmciHeaderSize, OmciContentSize, OmciTrailerSize, OmciMinimumFrameSize, \
    OmciTrailerThreshold, OmciBaselineDeviceId, message_type_names

log = structlog.get_logger()


class OmciHeader(Packet):
    name = "OmciHeader"
    fields_desc = [
        ShortField("transaction_id", 0),
        BitField("db", 0, 1),
        BitField("ar", 0, 1),
        BitField("ak", 0, 1),
        BitEnumField("message_type", 0, 5,
                     dict((int(k), v) for k, v in message_type_names.items())),
        XByteField("device_id", OmciBaselineDeviceId),
        ShortField("entity_class", 0),
        XShortField("entity_id", 0)
    ]

    def extract_padding(self, s):
        # the header never carries a payload layer, content is kept apart
        return b'', s


class OmciTrailer(Packet):
    name = "OmciTrailer"
    fields_desc = [
        XShortField("cpcs_uu_cpi", 0),
        ShortField("cpcs_sdu_length", 0x28),
        XIntField("crc32", 0)
    ]

    def extract_padding(self, s):
        return b'', s


def decode_header(buffer):
    """
    Decode the fixed OMCI message header

    Only the length is validated. Reserved message type codes and unknown
    class ids are legal and are resolved later on.

    :param buffer: (bytes) frame, at least the header octets
    :return: (OmciHeader) decoded header packet
    :raises OmciTruncatedFrameError: fewer than 8 octets supplied
    """
    if len(buffer) < OmciHeaderSize:
        raise OmciTruncatedFrameError(
            'OMCI header requires {} octets, got {}'.format(
                OmciHeaderSize, len(buffer)))
    return OmciHeader(bytes(buffer[:OmciHeaderSize]))


class OmciFrame(object):
    """
    A single OMCI frame split into header, content and optional trailer

    When the frame length announces a trailer the buffer does not fully
    hold, the octets that are present are kept as the partial trailer.
    """
    def __init__(self, header, content, trailer=None, partial_trailer=None):
        if len(content) != OmciContentSize:
            raise OmciTruncatedFrameError(
                'OMCI content requires {} octets, got {}'.format(
                    OmciContentSize, len(content)))
        self._header = header
        self._content = content
        self._trailer = trailer
        self._partial_trailer = partial_trailer

    def __str__(self):
        return 'OmciFrame(tid=0x{:04x}, type={}, class={}, ' \
               'instance=0x{:04x})'.format(
            self.transaction_id, self.message_type, self.entity_class,
            self.entity_id)

    def __bytes__(self):
        data = bytes(self._header) + self._content
        if self._trailer is not None:
            data += bytes(self._trailer)
        elif self._partial_trailer is not None:
            data += self._partial_trailer
        return data

    @property
    def header(self):
        return self._header

    @property
    def content(self):
        return self._content

    @property
    def trailer(self):
        return self._trailer

    @property
    def partial_trailer(self):
        """Trailer octets present in a short buffer, None if not truncated"""
        return self._partial_trailer

    @property
    def transaction_id(self):
        return self._header.transaction_id

    @property
    def message_type(self):
        """5-bit message type code"""
        return self._header.message_type

    @property
    def db(self):
        return self._header.db

    @property
    def ar(self):
        return self._header.ar

    @property
    def ak(self):
        return self._header.ak

    @property
    def device_id(self):
        return self._header.device_id

    @property
    def entity_class(self):
        return self._header.entity_class

    @property
    def entity_id(self):
        return self._header.entity_id

    @classmethod
    def from_bytes(cls, buffer, frame_length=None):
        """
        Split an OMCI frame buffer

        :param buffer: (bytes) frame as captured
        :param frame_length: (int) length of the frame on the wire, defaults
                             to the buffer length. Frames longer than 46
                             octets carry the 8 octet trailer
        :return: (OmciFrame)
        :raises OmciTruncatedFrameError: buffer is shorter than header and
                             content
        """
        buffer = bytes(buffer)
        if frame_length is None:
            frame_length = len(buffer)

        header = decode_header(buffer)

        if len(buffer) < OmciMinimumFrameSize:
            raise OmciTruncatedFrameError(
                'OMCI frame requires {} octets, got {}'.format(
                    OmciMinimumFrameSize, len(buffer)))

        content = buffer[OmciHeaderSize:OmciMinimumFrameSize]

        trailer = partial_trailer = None
        if frame_length > OmciTrailerThreshold:
            end = OmciMinimumFrameSize + OmciTrailerSize
            if len(buffer) < end:
                partial_trailer = buffer[OmciMinimumFrameSize:]
                log.debug('trailer-truncated', frame_length=frame_length,
                          available=len(partial_trailer))
            else:
                trailer = OmciTrailer(buffer[OmciMinimumFrameSize:end])

        return cls(header, content, trailer, partial_trailer)
