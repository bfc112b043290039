"""Sample markdown notes for testing.

Notes cover the frontmatter shapes the tool has to handle: no block, a
block holding only the uniqueId, a block shared with user fields, and a
malformed block.
"""

SAMPLE_UNIQUE_ID = "0b6f3f7e-5c1a-4a55-9d7b-3f1f2e0f9c11"

# Fresh note, never synced
SAMPLE_NOTE_PLAIN = """# Meeting notes

- Discussed roadmap
- Agreed on release date
"""

# Note whose only frontmatter field is the uniqueId
SAMPLE_NOTE_WITH_ID = f"""---
uniqueId: {SAMPLE_UNIQUE_ID}
---
# Meeting notes

- Discussed roadmap
"""

# Note with user fields next to the uniqueId
SAMPLE_NOTE_WITH_ID_AND_TAGS = f"""---
tags:
- work
- planning
uniqueId: {SAMPLE_UNIQUE_ID}
aliases: Roadmap
---
# Planning
"""

# Note with user frontmatter but no uniqueId yet
SAMPLE_NOTE_WITH_TAGS = """---
tags:
- work
---
# Planning
"""

# Frontmatter that is not valid YAML
SAMPLE_NOTE_MALFORMED = """---
tags: [work
uniqueId: abc
---
# Broken
"""
