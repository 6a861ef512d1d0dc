"""
midiascii - deterministic ASCII art from MIDI key presses.

Every key on a MIDI controller draws a full-terminal pattern. The note number
picks one of seven procedural patterns (wave, diagonal, circle, grid, noise,
chevron, spiral) and a salt assigned to that key the first time it is pressed
seeds the pattern's randomness - the same key keeps the same picture until the
program exits.

The pattern engine is pure and knows nothing about MIDI or terminals:

```python
import midiascii

grid = midiascii.generate(0, columns=10, rows=5, salt=42)
print(midiascii.render(grid))
```

Run the live display with ``python -m midiascii`` (or ``midi-ascii-art``).
"""

import midiascii.registry
import midiascii.rendering

from midiascii.patterns import Grid
from midiascii.registry import PATTERNS, PatternDescriptor, generate, select_by_index
from midiascii.rendering import render
from midiascii.seeded_random import SeededRandom
