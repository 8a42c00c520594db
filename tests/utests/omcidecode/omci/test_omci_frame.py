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
from unittest import TestCase, main
from binascii import hexlify

from omcidecode.omci.omci_defs import OmciTruncatedFrameError, OmciMessageType
from omcidecode.omci.omci_frame import OmciFrame, OmciHeader, OmciTrailer, \
    decode_header


def hexify(buffer):
    """Return a hexadecimal string encoding of input buffer"""
    return hexlify(buffer).decode('ascii')


def chunk(indexable, chunk_size):
    for i in range(0, len(indexable), chunk_size):
        yield indexable[i:i + chunk_size]


def hex2raw(hex_string):
    return bytes(int(byte, 16) for byte in chunk(hex_string, 2))


class TestOmciHeader(TestCase):

    reference_get_request_hex = (
        '00 00 49 0a'
        '00 06 01 01'
        '08 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 00'
        '00 00 00 28'.replace(' ', '')
    )
    reference_get_request_raw = hex2raw(reference_get_request_hex)

    def test_decode_header(self):
        header = decode_header(self.reference_get_request_raw)
        self.assertEqual(header.transaction_id, 0)
        self.assertEqual(header.db, 0)
        self.assertEqual(header.ar, 1)
        self.assertEqual(header.ak, 0)
        self.assertEqual(header.message_type, OmciMessageType.Get)
        self.assertEqual(header.device_id, 0x0a)
        self.assertEqual(header.entity_class, 6)
        self.assertEqual(header.entity_id, 0x101)

    def test_decode_header_flags(self):
        # DB, AK and MIB Upload Next
        header = decode_header(hex2raw('1234ae0b01070002'))
        self.assertEqual(header.transaction_id, 0x1234)
        self.assertEqual(header.db, 1)
        self.assertEqual(header.ar, 0)
        self.assertEqual(header.ak, 1)
        self.assertEqual(header.message_type, OmciMessageType.MibUploadNext)
        self.assertEqual(header.device_id, 0x0b)
        self.assertEqual(header.entity_class, 263)
        self.assertEqual(header.entity_id, 2)

    def test_reserved_message_type_is_legal(self):
        header = decode_header(hex2raw('0001400a00020000'))
        self.assertEqual(header.message_type, 0)
        self.assertEqual(header.ar, 1)

    def test_header_serialization(self):
        header = OmciHeader(transaction_id=0x0102, ar=1,
                            message_type=OmciMessageType.Set,
                            entity_class=262, entity_id=0x8001)
        self.assertEqual(hexify(bytes(header)), '0102480a01068001')
        self.assertEqual(bytes(decode_header(bytes(header))), bytes(header))

    def test_truncated_header(self):
        self.assertRaises(OmciTruncatedFrameError, decode_header, b'')
        self.assertRaises(OmciTruncatedFrameError, decode_header,
                          hex2raw('0000490a000601'))


class TestOmciFrame(TestCase):

    header_hex = '0001490a00020000'
    content_hex = '8000' + '00' * 30
    trailer_hex = '0000002882c8dc0c'

    def test_frame_without_trailer(self):
        frame = OmciFrame.from_bytes(hex2raw(self.header_hex +
                                             self.content_hex))
        self.assertEqual(len(frame.content), 32)
        self.assertEqual(hexify(frame.content), self.content_hex)
        self.assertIsNone(frame.trailer)
        self.assertEqual(frame.entity_class, 2)
        self.assertEqual(frame.message_type, OmciMessageType.Get)

    def test_frame_of_46_octets_has_no_trailer(self):
        raw = hex2raw(self.header_hex + self.content_hex + '0000002a8e2d')
        self.assertEqual(len(raw), 46)
        frame = OmciFrame.from_bytes(raw)
        self.assertIsNone(frame.trailer)

    def test_frame_with_trailer(self):
        raw = hex2raw(self.header_hex + self.content_hex + self.trailer_hex)
        self.assertEqual(len(raw), 48)
        frame = OmciFrame.from_bytes(raw)
        self.assertIsNotNone(frame.trailer)
        self.assertEqual(frame.trailer.cpcs_uu_cpi, 0)
        self.assertEqual(frame.trailer.cpcs_sdu_length, 0x28)
        self.assertEqual(frame.trailer.crc32, 0x82c8dc0c)
        self.assertEqual(bytes(frame), raw)

    def test_trailer_follows_content_in_54_octet_frame(self):
        raw = hex2raw(self.header_hex + self.content_hex + self.trailer_hex +
                      'aabbccddeeff')
        self.assertEqual(len(raw), 54)
        frame = OmciFrame.from_bytes(raw)
        self.assertEqual(hexify(bytes(frame.trailer)), self.trailer_hex)

    def test_frame_length_decides_trailer(self):
        raw = hex2raw(self.header_hex + self.content_hex + self.trailer_hex)
        self.assertIsNone(OmciFrame.from_bytes(raw, frame_length=44).trailer)
        self.assertIsNotNone(
            OmciFrame.from_bytes(raw, frame_length=48).trailer)

    def test_missing_trailer(self):
        raw = hex2raw(self.header_hex + self.content_hex)
        frame = OmciFrame.from_bytes(raw, frame_length=48)
        self.assertIsNone(frame.trailer)
        self.assertEqual(frame.partial_trailer, b'')

    def test_short_trailer(self):
        raw = hex2raw(self.header_hex + self.content_hex + self.trailer_hex)
        frame = OmciFrame.from_bytes(raw[:47])
        self.assertIsNone(frame.trailer)
        self.assertEqual(hexify(frame.partial_trailer), self.trailer_hex[:14])
        self.assertEqual(bytes(frame), raw[:47])

        frame = OmciFrame.from_bytes(raw[:43], frame_length=48)
        self.assertEqual(hexify(frame.partial_trailer), self.trailer_hex[:6])

    def test_complete_trailer_is_not_partial(self):
        raw = hex2raw(self.header_hex + self.content_hex + self.trailer_hex)
        self.assertIsNone(OmciFrame.from_bytes(raw).partial_trailer)
        self.assertIsNone(OmciFrame.from_bytes(raw[:40]).partial_trailer)

    def test_content_length_checked(self):
        header = decode_header(hex2raw(self.header_hex))
        self.assertRaises(OmciTruncatedFrameError, OmciFrame, header,
                          bytes(31))

    def test_truncated_content(self):
        raw = hex2raw(self.header_hex + self.content_hex)[:39]
        self.assertRaises(OmciTruncatedFrameError, OmciFrame.from_bytes, raw)

    def test_trailer_packet(self):
        trailer = OmciTrailer(crc32=0x82c8dc0c)
        self.assertEqual(hexify(bytes(trailer)), self.trailer_hex)


if __name__ == '__main__':
    main()
