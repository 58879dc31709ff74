from __future__ import annotations

import json
from pathlib import Path
from typing import Any

PLUGIN_CLASS = """<?php

namespace Acme\\FilamentMember;

class FilamentMemberPlugin implements Plugin
{
    public function register(Panel $panel): void
    {
        $panel
            ->pages([
            ]);
    }
}
"""


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")
    return path
