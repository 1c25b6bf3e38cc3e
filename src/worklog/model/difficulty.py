# SPDX-License-Identifier: MIT

from enum import StrEnum


class Difficulty(StrEnum):
    LOW = "Baixa"
    MEDIUM = "Média"
    HIGH = "Alta"
    VERY_HIGH = "Altíssima"
    UNSET = ""
