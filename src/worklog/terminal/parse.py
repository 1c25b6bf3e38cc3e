# SPDX-License-Identifier: MIT

import base64
import mimetypes
import os
import re
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

import pendulum
import typer

from worklog.model.difficulty import Difficulty
from worklog.time import is_iso_date, now_time_str


def parse_date(date_param: Optional[str]) -> Optional[str]:
    """
    Parse a date option into 'YYYY-MM-DD'.

    Accepts YYYY-MM-DD, today (t), yesterday (y), tomorrow (o) or a day offset
    such as 1 or -1.
    """
    if date_param is None:
        return None

    date = str(date_param).strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        if not is_iso_date(date):
            raise typer.BadParameter(f"Invalid date '{date}'")
        return date

    if re.match(r"^-?\d+$", date):
        return pendulum.today().add(days=int(date)).to_date_string()

    if date in ("today", "t"):
        return pendulum.today().to_date_string()
    if date in ("yesterday", "y"):
        return pendulum.yesterday().to_date_string()
    if date in ("tomorrow", "o"):
        return pendulum.tomorrow().to_date_string()
    raise typer.BadParameter("Incorrect date format")


def parse_time_of_day(time_param: Optional[str]) -> Optional[str]:
    """Parse (H)H:mm or now (n) into a zero padded 'HH:mm' string."""
    if time_param is None:
        return None

    time_str = str(time_param).strip()
    if time_str in ("now", "n"):
        return now_time_str()

    time_match = re.match(r"^(\d{1,2}):(\d{2})$", time_str)
    if not time_match:
        raise typer.BadParameter(
            f"Time must be in HH:mm format (e.g., 8:00 or 17:30), got '{time_str}'"
        )

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))
    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

    return f"{hour:02d}:{minute:02d}"


def parse_difficulty(difficulty_param: Optional[str]) -> Optional[str]:
    """Accept a difficulty by its label (Média) or its name (medium, very_high)."""
    if difficulty_param is None:
        return None

    value = str(difficulty_param).strip()
    for difficulty in Difficulty:
        if value == difficulty.value or value.upper() == difficulty.name:
            return difficulty.value
    choices = ", ".join(difficulty.name.lower() for difficulty in Difficulty)
    raise typer.BadParameter(f"Unknown difficulty '{value}', choose from: {choices}")


def read_voice_note(path: Path) -> str:
    """Read an audio file into a data URL, stored with the record as-is."""
    if not path.is_file():
        raise typer.BadParameter(f"Audio file not found: {path}")
    mime_type = mimetypes.guess_type(path.name)[0] or "audio/webm"
    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def open_editor_for_text(initial_text: Optional[str] = None) -> Optional[str]:
    """
    Open the user's preferred editor to edit note text.
    Returns the edited text with trailing newlines removed, or None if empty.
    """
    editor = os.environ.get("EDITOR", "nano")

    with tempfile.NamedTemporaryFile(mode="w+", suffix=".txt") as tf:
        if initial_text is not None:
            tf.write(initial_text)
            tf.flush()

        subprocess.run([editor, tf.name], check=True)
        tf.seek(0)
        text = tf.read()
        if not text.strip():
            return None
        # Keep internal empty lines
        return text.rstrip("\n")
