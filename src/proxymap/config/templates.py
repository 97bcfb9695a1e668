# Default config template
DEFAULT_CONFIG_TEMPLATE = """{{
  "mappings": [
    {{
      "source": "{source}",
      "proxy": "{proxy}"
    }}
  ],

  "preview": {{
    "empty_selection": "all"
  }},

  "output": {{
    "file": null,
    "copy": false,
    "print_mode": "plain"
  }}
}}"""

DEFAULT_CONFIG_PATH = "config/proxymap.json"

EXAMPLE_SOURCE = "claude.ai"
EXAMPLE_PROXY = "claude.hubp.de"
