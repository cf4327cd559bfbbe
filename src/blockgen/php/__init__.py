# topmark:header:start
#
#   project      : BlockGen
#   file         : __init__.py
#   file_relpath : src/blockgen/php/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""PHP helpers layered on the core emitter.

- ``builder``: `CodeBuilder`, the class/function/conditional/doc/declaration façade.
- ``values``: PHP literal rendering for declaration values.
"""

from __future__ import annotations
