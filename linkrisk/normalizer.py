# linkrisk/normalizer.py
from dataclasses import dataclass
import re

_SCHEME_RE = re.compile(r"^https?://", re.I)
_HOST_END_RE = re.compile(r"[/?#]")


@dataclass(frozen=True)
class NormalizedInput:
    raw: str                 # input exactly as given
    trimmed_lower: str       # stripped + lower-cased
    host_stripped: str       # scheme and leading "www." removed
    host: str                # host_stripped up to the first '/', '?' or '#'

    @property
    def trimmed(self) -> str:
        return self.raw.strip()


def normalize(raw: str) -> NormalizedInput:
    """Derive the comparison forms every rule works on. Never fails for a str."""
    trimmed = raw.strip()
    lower = trimmed.lower()
    clean = _SCHEME_RE.sub("", lower, count=1)
    if clean.startswith("www."):
        clean = clean[4:]
    host = _HOST_END_RE.split(clean, maxsplit=1)[0]
    return NormalizedInput(
        raw=raw,
        trimmed_lower=lower,
        host_stripped=clean,
        host=host,
    )
