#!/usr/bin/env python3
"""
Quick splitting examples for IPython/Jupyter.

Copy and paste these code blocks into IPython for quick testing.
"""

# =============================================================================
# Method 1: Quick CLI splitting (fastest for testing)
# =============================================================================

"""
# In IPython:
!python -m bt_string_utils split --input story.txt --strategy balanced --groups 3 --output outputs/story_groups.json

# Then load and inspect:
import json
with open("outputs/story_groups.json", encoding="utf-8") as f:
    data = json.load(f)
groups = data["documents"]["story.txt"]["groups"]
print(f"{len(groups)} groups, word counts: {data['documents']['story.txt']['stats']['word_counts']}")
"""

# =============================================================================
# Method 2: Programmatic splitting (more control)
# =============================================================================

"""
# In IPython:
from bt_string_utils import split_balanced
from bt_string_utils.split import analyze_groups, preview_groups

text = open("story.txt", encoding="utf-8").read()
groups = split_balanced(text, 3)

assert "".join(groups) == text
print(analyze_groups(groups))
for preview in preview_groups(groups, max_preview=80):
    print(preview)
"""

# =============================================================================
# Method 3: Byte-bounded pieces (for size-limited APIs)
# =============================================================================

"""
# In IPython:
from bt_string_utils import chunk_by_bytes

pieces = chunk_by_bytes(text, 2000)
print(f"{len(pieces)} pieces, largest {max(len(p.encode('utf-8')) for p in pieces)} bytes")
"""
