from __future__ import annotations

import re

# Regular expressions
MSG_RE = re.compile(
    b"\\AMSG\\s+([^\\s]+)\\s+([^\\s]+)\\s+(([^\\s]+)[^\\S\r\n]+)?(\\d+)\r\n"
)
HMSG_RE = re.compile(
    b"\\AHMSG\\s+([^\\s]+)\\s+([^\\s]+)\\s+(([^\\s]+)[^\\S\r\n]+)?([\\d]+)\\s+(\\d+)\r\n"
)

# Protocol operations
PUB_OP = b"PUB"
HPUB_OP = b"HPUB"

# Protocol syntax
CRLF = b"\r\n"
CRLF_S = CRLF.decode()
DOUBLE_CRLF = CRLF + CRLF

# String constants
PUB_OP_S = PUB_OP.decode()
HPUB_OP_S = HPUB_OP.decode()

# Sizes
DOUBLE_CRLF_SIZE = len(DOUBLE_CRLF)

# Message headers are in the form of:
#
# NATS/1.0\r\nkey1:value1\r\nkey2:value2\r\n\r\n
#
NATS_HDR_LINE = b"NATS/1.0"
NATS_HDR_PREAMBLE = NATS_HDR_LINE + CRLF
NATS_HDR_PREAMBLE_S = NATS_HDR_PREAMBLE.decode()
NATS_HDR_PREAMBLE_SIZE = len(NATS_HDR_PREAMBLE)
HDR_KV_SEP = ":"
# Smallest block holding a single pair: NATS/1.0\r\nk:v\r\n\r\n
MIN_VALID_HDR_LEN = len(NATS_HDR_PREAMBLE + b"k:v" + CRLF + CRLF)

# Number of payload bytes rendered by str(msg)
MSG_PREVIEW_SIZE = 32
