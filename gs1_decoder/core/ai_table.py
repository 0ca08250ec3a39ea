"""
AI Table for the GS1 Decoder

Holds the compiled-in GS1 Application Identifier table and the digit trie
used to recognize AIs at the front of an element string.

Each AI is bound to exactly one decoder kind plus its per-AI parameters
(title, fixed length, unit, numeric flag, variable-length cap, decimal-place
source). Building the trie checks the table: duplicate AIs and AIs that are
a prefix of another AI are rejected.

Reference: https://ref.gs1.org/ai/
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import InvalidAIError


class DecoderKind(str, Enum):
    """Field layout strategies."""
    FIXED_LENGTH = "fixed"
    VARIABLE_LENGTH = "var"
    DATE = "date"
    FIXED_LENGTH_MEASURE = "measure"
    VARIABLE_LENGTH_MEASURE = "varmeasure"
    VARIABLE_LENGTH_ISO_NUMBERS = "isonum"
    VARIABLE_LENGTH_ISO_CHARS = "isochar"


# Kinds whose AI is followed by a digit giving the number of decimals
MEASURE_KINDS = frozenset({
    DecoderKind.FIXED_LENGTH_MEASURE,
    DecoderKind.VARIABLE_LENGTH_MEASURE,
    DecoderKind.VARIABLE_LENGTH_ISO_NUMBERS,
})


@dataclass(frozen=True)
class AIDefinition:
    """
    Static description of one AI stem.

    Attributes:
        stem: The AI digits matched by the trie (2-4 digits)
        title: Short GS1 data title
        kind: Decoder used for the data following the stem
        fixed_length: Data length for fixed-length kinds
        unit: Implicit unit of measurement (measure kinds)
        numeric: Data must be all digits
        variable_cap: Maximum length of an unterminated variable-length field
        decimals: Fixed number of decimals; None reads it from the digit
            following the stem
        signed: A trailing minus sign may follow the data (temperatures)
        uses_lot_length: Cap is taken from ParserConfig.lot_max_length
    """
    stem: str
    title: str
    kind: DecoderKind
    fixed_length: Optional[int] = None
    unit: str = ""
    numeric: bool = False
    variable_cap: Optional[int] = None
    decimals: Optional[int] = None
    signed: bool = False
    uses_lot_length: bool = False

    @property
    def reads_decimal_digit(self) -> bool:
        return self.kind in MEASURE_KINDS and self.decimals is None


class TrieNode:
    """Trie node keyed by a single AI digit."""
    __slots__ = ['children', 'definition']

    def __init__(self):
        self.children: Dict[str, TrieNode] = {}
        self.definition: Optional[AIDefinition] = None


class AITrie:
    """
    Digit trie over all AI stems.

    Lookup inspects only as many digits as needed to reach a leaf, so it is
    O(k) with k the AI length (2-4).
    """

    def __init__(self):
        self.root = TrieNode()
        self._all_ais: Dict[str, AIDefinition] = {}

    def insert(self, definition: AIDefinition) -> None:
        """Insert an AI definition, rejecting duplicates and prefix overlaps."""
        stem = definition.stem
        if not stem.isdigit():
            raise ValueError(f"AI stem must be numeric: {stem!r}")
        if stem in self._all_ais:
            raise ValueError(f"Duplicate AI stem: {stem}")

        node = self.root
        for char in stem:
            if node.definition is not None:
                raise ValueError(
                    f"AI {node.definition.stem} is a prefix of AI {stem}"
                )
            node = node.children.setdefault(char, TrieNode())
        if node.children:
            raise ValueError(f"AI {stem} is a prefix of another AI")

        node.definition = definition
        self._all_ais[stem] = definition

    def match(self, text: str, start: int = 0) -> AIDefinition:
        """
        Identify the AI at position ``start``.

        Raises:
            InvalidAIError: naming the digits matched so far and the
                character that continues no known AI
        """
        node = self.root
        pos = start
        while node.definition is None:
            char = text[pos:pos + 1]
            child = node.children.get(char)
            if child is None:
                raise InvalidAIError(text[start:pos], char)
            node = child
            pos += 1
        return node.definition

    def get(self, stem: str) -> Optional[AIDefinition]:
        """Get an AI definition by exact stem."""
        return self._all_ais.get(stem)

    def __contains__(self, stem: str) -> bool:
        return stem in self._all_ais

    def __len__(self) -> int:
        return len(self._all_ais)

    def all_entries(self) -> Dict[str, AIDefinition]:
        """Return all AI definitions."""
        return self._all_ais.copy()


# GS1 AI table
#
# Columns: AI, decoder kind, length, attributes, title.
#   length:  N = fixed length, ..N = variable with cap N, .. = variable, no cap
#   attrs:   num (digits only), lot (cap from lot_max_length), unit=XXX,
#            dec=N (fixed decimals), signed (trailing minus allowed), - (none)
#   AI:      310n = stem 310 followed by a decimals digit,
#            7030-7039 = one AI per number, {n} in the title is its last digit
RAW_AI_TABLE = """
# AI        Kind        Length  Attributes          Title
00          fixed       18      num                 # SSCC
01          fixed       14      num                 # GTIN
02          fixed       14      -                   # CONTENT
03          fixed       14      -                   # MTO GTIN
10          var         ..20    lot                 # BATCH/LOT
11          date        6       -                   # PROD DATE
12          date        6       -                   # DUE DATE
13          date        6       -                   # PACK DATE
15          date        6       -                   # BEST BEFORE or BEST BY
16          date        6       -                   # SELL BY
17          date        6       -                   # USE BY OR EXPIRY
20          fixed       2       -                   # VARIANT
21          var         ..20    lot                 # SERIAL
22          var         ..20    -                   # CPV
235         var         ..28    -                   # TPX
240         var         ..30    -                   # ADDITIONAL ID
241         var         ..30    -                   # CUST. PART NO.
242         var         ..6     -                   # MTO VARIANT
243         var         ..20    -                   # PCN
250         var         ..30    -                   # SECONDARY SERIAL
251         var         ..30    -                   # REF. TO SOURCE
253         var         ..42    -                   # GDTI
254         var         ..20    -                   # GLN EXTENSION COMPONENT
255         var         ..37    -                   # GCN
30          var         ..8     -                   # VAR. COUNT
310n        measure     6       unit=KGM            # NET WEIGHT (kg)
311n        measure     6       unit=MTR            # LENGTH (m)
312n        measure     6       unit=MTR            # WIDTH (m)
313n        measure     6       unit=MTR            # HEIGHT (m)
314n        measure     6       unit=MTK            # AREA (m2)
315n        measure     6       unit=LTR            # NET VOLUME (l)
316n        measure     6       unit=MTQ            # NET VOLUME (m3)
320n        measure     6       unit=LBR            # NET WEIGHT (lb)
321n        measure     6       unit=INH            # LENGTH (i)
322n        measure     6       unit=FOT            # LENGTH (f)
323n        measure     6       unit=YRD            # LENGTH (y)
324n        measure     6       unit=INH            # WIDTH (i)
325n        measure     6       unit=FOT            # WIDTH (f)
326n        measure     6       unit=YRD            # WIDTH (y)
327n        measure     6       unit=INH            # HEIGHT (i)
328n        measure     6       unit=FOT            # HEIGHT (f)
329n        measure     6       unit=YRD            # HEIGHT (y)
330n        measure     6       unit=KGM            # GROSS WEIGHT (kg)
331n        measure     6       unit=MTR            # LENGTH (m), log
332n        measure     6       unit=MTR            # WIDTH (m), log
333n        measure     6       unit=MTR            # HEIGHT (m), log
334n        measure     6       unit=MTK            # AREA (m2), log
335n        measure     6       unit=LTR            # VOLUME (l), log
336n        measure     6       unit=MTQ            # VOLUME (m3), log
337n        measure     6       unit=28             # KG PER m²
340n        measure     6       unit=LBR            # GROSS WEIGHT (lb)
341n        measure     6       unit=INH            # LENGTH (i), log
342n        measure     6       unit=FOT            # LENGTH (f), log
343n        measure     6       unit=YRD            # LENGTH (y), log
344n        measure     6       unit=INH            # WIDTH (i), log
345n        measure     6       unit=FOT            # WIDTH (f), log
346n        measure     6       unit=YRD            # WIDTH (y), log
347n        measure     6       unit=INH            # HEIGHT (i), log
348n        measure     6       unit=FOT            # HEIGHT (f), log
349n        measure     6       unit=YRD            # HEIGHT (y), log
350n        measure     6       unit=INK            # AREA (i2)
351n        measure     6       unit=FTK            # AREA (f2)
352n        measure     6       unit=YDK            # AREA (y2)
353n        measure     6       unit=INK            # AREA (i2), log
354n        measure     6       unit=FTK            # AREA (f2), log
355n        measure     6       unit=YDK            # AREA (y2), log
356n        measure     6       unit=APZ            # NET WEIGHT (t)
357n        measure     6       unit=ONZ            # NET VOLUME (oz)
360n        measure     6       unit=QT             # NET VOLUME (q)
361n        measure     6       unit=GLL            # NET VOLUME (g)
362n        measure     6       unit=QT             # VOLUME (q), log
363n        measure     6       unit=GLL            # VOLUME (g), log
364n        measure     6       unit=INQ            # VOLUME (i3)
365n        measure     6       unit=FTQ            # VOLUME (f3)
366n        measure     6       unit=YDQ            # VOLUME (y3)
367n        measure     6       unit=INQ            # VOLUME (i3), log
368n        measure     6       unit=FTQ            # VOLUME (f3), log
369n        measure     6       unit=YDQ            # VOLUME (y3), log
37          var         ..8     -                   # COUNT
390n        varmeasure  ..      -                   # AMOUNT
391n        isonum      ..      -                   # AMOUNT
392n        varmeasure  ..      -                   # PRICE
393n        isonum      ..      -                   # PRICE
394n        measure     4       -                   # PRCNT OFF
395n        measure     6       -                   # PRICE/UoM
400         var         ..30    -                   # ORDER NUMBER
401         var         ..      -                   # GINC
402         var         ..17    -                   # GSIN
403         var         ..30    -                   # ROUTE
410         fixed       13      -                   # SHIP TO LOC
411         fixed       13      -                   # BILL TO
412         fixed       13      -                   # PURCHASE FROM
413         fixed       13      -                   # SHIP FOR LOC
414         fixed       13      -                   # LOC NO
415         fixed       13      -                   # PAY TO
416         fixed       13      -                   # PROD/SERV LOC
417         fixed       13      -                   # PARTY
420         var         ..20    -                   # SHIP TO POST
421         isochar     ..      -                   # SHIP TO POST
422         fixed       3       -                   # ORIGIN
423         var         ..15    -                   # COUNTRY - INITIAL PROCESS.
424         fixed       3       -                   # COUNTRY - PROCESS.
425         fixed       3       -                   # COUNTRY - DISASSEMBLY
426         fixed       3       -                   # COUNTRY - FULL PROCESS
427         var         ..3     -                   # ORIGIN SUBDIVISION
4300        var         ..35    -                   # SHIP TO COMP
4301        var         ..35    -                   # SHIP TO NAME
4302        var         ..70    -                   # SHIP TO ADD1
4303        var         ..70    -                   # SHIP TO ADD2
4304        var         ..70    -                   # SHIP TO SUB
4305        var         ..70    -                   # SHIP TO LOC
4306        var         ..70    -                   # SHIP TO REG
4307        fixed       2       -                   # SHIP TO COUNTRY
4308        var         ..30    -                   # SHIP TO PHONE
4309        var         ..20    -                   # SHIP TO GEO
4310        var         ..35    -                   # RTN TO COMP
4311        var         ..35    -                   # RTN TO NAME
4312        var         ..70    -                   # RTN TO ADD1
4313        var         ..70    -                   # RTN TO ADD2
4314        var         ..70    -                   # RTN TO SUB
4315        var         ..70    -                   # RTN TO LOC
4316        var         ..70    -                   # RTN TO REG
4317        fixed       2       -                   # RTN TO COUNTRY
4318        var         ..20    -                   # RTN TO POST
4319        var         ..30    -                   # RTN TO PHONE
4320        var         ..35    -                   # SRV DESCRIPTION
4321        fixed       1       -                   # DANGEROUS GOODS
4322        fixed       1       -                   # AUTH LEAVE
4323        fixed       1       -                   # SIG REQUIRED
4324        fixed       10      num                 # NBEF DEL DT
4325        fixed       10      num                 # NAFT DEL DT
4326        date        6       -                   # REL DATE
4330        measure     6       dec=2 signed unit=°F   # MAX TEMP (F)
4331        measure     6       dec=2 signed unit=°C   # MAX TEMP (C)
4332        measure     6       dec=2 signed unit=°F   # MIN TEMP (F)
4333        measure     6       dec=2 signed unit=°C   # MIN TEMP (C)
7001        var         ..13    -                   # NSN
7002        var         ..      -                   # MEAT CUT
7003        var         ..10    -                   # EXPIRY TIME
7004        var         ..6     -                   # ACTIVE POTENCY
7006        date        6       -                   # FIRST FREEZE DATE
7030-7039   isochar     ..      -                   # PROCESSOR # {n}
710         var         ..      -                   # NHRN PZN
711         var         ..      -                   # NHRN CIP
712         var         ..      -                   # NHRN CN
713         var         ..      -                   # NHRN DRN
714         var         ..20    -                   # NHRN AIM
715         var         ..20    -                   # NHRN NDC
716         var         ..20    -                   # NHRN AIC
717         var         ..20    -                   # NHRN SRN
8001        var         ..14    -                   # DIMENSIONS
8002        var         ..      -                   # CMT NO
8003        var         ..      -                   # GRAI
8004        var         ..      -                   # GIAI
8005        var         ..6     -                   # PRICE PER UNIT
8006        var         ..18    -                   # GCTIN
8007        var         ..      -                   # IBAN
8008        var         ..12    -                   # PROD TIME
8010        var         ..      -                   # CPID
8011        var         ..      -                   # CPID SERIAL
8017        var         ..18    -                   # GSRN - PROVIDER
8018        var         ..18    num                 # GSRN - RECIPIENT
8019        var         ..      num                 # SRIN
8020        var         ..      -                   # REF NO
8100        var         ..6     -                   # COUPON EXT. (NSC + OFFER CODE)
8101        var         ..10    -                   # COUPON EXT. (NSC + OFFER CODE + END OF OFFER)
8102        var         ..2     -                   # COUPON EXT. (NSC)
8110        var         ..      -                   # COUPON CODE
8200        var         ..      -                   # PRODUCT URL
90          var         ..      -                   # INTERNAL
91-99       var         ..      -                   # INTERNAL
"""


def _parse_length(spec: str) -> Tuple[Optional[int], Optional[int]]:
    """
    Parse the length column.

    Examples:
        "18"   -> (18, None)
        "..20" -> (None, 20)
        ".."   -> (None, None)

    Returns:
        (fixed_length, variable_cap)
    """
    if spec.startswith('..'):
        cap = spec[2:]
        return None, int(cap) if cap else None
    return int(spec), None


def _create_definition(
    stem: str,
    title: str,
    kind: DecoderKind,
    length_spec: str,
    attributes: List[str]
) -> AIDefinition:
    """Create an AIDefinition from one table row."""
    fixed_length, variable_cap = _parse_length(length_spec)

    unit = ""
    decimals = None
    numeric = False
    signed = False
    uses_lot_length = False

    for attr in attributes:
        if attr == '-':
            continue
        elif attr == 'num':
            numeric = True
        elif attr == 'lot':
            uses_lot_length = True
        elif attr == 'signed':
            signed = True
        elif attr.startswith('unit='):
            unit = attr[5:]
        elif attr.startswith('dec='):
            decimals = int(attr[4:])
        else:
            raise ValueError(f"Unknown attribute {attr!r} for AI {stem}")

    return AIDefinition(
        stem=stem,
        title=title,
        kind=kind,
        fixed_length=fixed_length,
        unit=unit,
        numeric=numeric,
        variable_cap=variable_cap,
        decimals=decimals,
        signed=signed,
        uses_lot_length=uses_lot_length,
    )


def _parse_raw_table(raw: str = RAW_AI_TABLE) -> List[AIDefinition]:
    """Parse the raw AI table text into AIDefinition objects."""
    definitions = []

    for line in raw.strip().split('\n'):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        main_part, _, title = line.partition('#')
        title = title.strip()
        tokens = main_part.split()
        if len(tokens) < 3:
            raise ValueError(f"Malformed AI table row: {line!r}")

        ai_spec, kind_token, length_spec = tokens[:3]
        attributes = tokens[3:]
        kind = DecoderKind(kind_token)

        # 310n: stem followed by a decimals digit read at decode time
        if ai_spec.endswith('n'):
            stem = ai_spec[:-1]
            if kind not in MEASURE_KINDS:
                raise ValueError(f"AI {ai_spec} needs a measure decoder")
            definitions.append(
                _create_definition(stem, title, kind, length_spec, attributes)
            )
        # Ranges like 7030-7039
        elif '-' in ai_spec:
            start, end = ai_spec.split('-')
            for number in range(int(start), int(end) + 1):
                stem = str(number).zfill(len(start))
                definitions.append(_create_definition(
                    stem,
                    title.replace('{n}', stem[-1]),
                    kind,
                    length_spec,
                    attributes,
                ))
        else:
            definitions.append(
                _create_definition(ai_spec, title, kind, length_spec, attributes)
            )

    return definitions


def build_ai_trie(definitions: List[AIDefinition]) -> AITrie:
    """Build a trie from definitions; raises ValueError on conflicts."""
    trie = AITrie()
    for definition in definitions:
        trie.insert(definition)
    return trie


# Global cached table instance
_cached_table: Optional[AITrie] = None


def load_ai_table(force_reload: bool = False) -> AITrie:
    """
    Load the AI table, using cache when possible.

    The trie is immutable after construction and safe to share between
    decoder instances and threads.
    """
    global _cached_table

    if _cached_table is None or force_reload:
        _cached_table = build_ai_trie(_parse_raw_table())

    return _cached_table
