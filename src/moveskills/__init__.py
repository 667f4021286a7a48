"""Move Skills — Aptos Move and TypeScript SDK skills for Claude Desktop.

Bundles knowledge packs (SKILL.md plus examples) and a small installer that
copies them into the skills directory the desktop app reads.
"""

import logging

__version__ = "1.0.0"

SKILLS_DIRNAME = "skills"

# Installer records only surface when the CLI runs with --verbose.
logging.getLogger("moveskills").addHandler(logging.NullHandler())
