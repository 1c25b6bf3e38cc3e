# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

RecordId: TypeAlias = str


def generate_record_id() -> RecordId:
    return str(uuid.uuid4())
