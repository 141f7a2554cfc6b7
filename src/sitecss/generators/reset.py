"""Element reset, emitted inside ``@layer base`` ahead of the utilities.

Being layered below ``utilities``, none of these element rules can override
a compiled utility class.
"""

from __future__ import annotations

BASE_LAYER_ORDER = "@layer base, utilities;"

BASE_RESET = """\
*, ::before, ::after {
  box-sizing: border-box;
  border-width: 0;
  border-style: solid;
}
html, body {
  margin: 0;
  padding: 0;
  width: 100%;
}
button, [role="button"] {
  cursor: pointer;
}
a {
  color: inherit;
  text-decoration: inherit;
}
h1, h2, h3, h4, h5, h6 {
  font-size: inherit;
  font-weight: inherit;
  margin: 0;
}
p, blockquote, figure, pre {
  margin: 0;
}
ul, ol {
  margin: 0;
  padding: 0;
  list-style: none;
}
button, input, optgroup, select, textarea {
  font-family: inherit;
  font-size: 100%;
  font-weight: inherit;
  line-height: inherit;
  color: inherit;
  margin: 0;
  padding: 0;
}
img, svg, video, canvas, audio, iframe, embed, object {
  display: block;
  vertical-align: middle;
}
img, video {
  max-width: 100%;
  height: auto;
}
[hidden] {
  display: none;
}"""


def generate_base_css() -> str:
    """The layer-order statement followed by the reset wrapped in ``@layer base``."""
    body = "\n".join(f"  {line}" if line else line for line in BASE_RESET.splitlines())
    return f"{BASE_LAYER_ORDER}\n\n@layer base {{\n{body}\n}}"
