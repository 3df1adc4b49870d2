"""Sample HOTO messages shared by the engine tests."""

from __future__ import annotations

EXISTING = """DAILY DRUGS HOTO
10/02/2025 ND

*A441D*
Drugs used:
- Morphine x2
- Midazolam x1

*A442D*
Drugs used:
- Nil

Drug totals:
Morphine: 5
Midazolam: 3
Adrenaline: -

Checked by SGT Tan"""

CREATED = """DAILY DRUGS HOTO
11/02/2025 DD

*A441D*
Drugs used:
- Morphine x2

Drug totals:
Morphine: -"""

UNHEADED_TOTALS = """DAILY DRUGS HOTO
11/02/2025 DD

*A441D*
Drugs used:
- Morphine x2
Fluids: 2
Note about fluids

Morphine: 5
Midazolam: 1"""
