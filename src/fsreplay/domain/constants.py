from __future__ import annotations

"""
Transcript Grammar Constants.

Tokens and markers of the terminal transcript format, the default pruning
threshold and the canonical sample session used by the CLI `--sample` flag.
"""

# -----------------------------------------------------------------------------
# GRAMMAR TOKENS
# -----------------------------------------------------------------------------

CMD_DELIMITER = "$"
NEWLINE = "\n"
CD = "cd"
LS = "ls"
PARENT_DIR = ".."

# -----------------------------------------------------------------------------
# QUERY DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_PRUNE_THRESHOLD = 100_000

# Source: https://adventofcode.com/2022/day/7
SAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""
