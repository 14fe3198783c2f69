import json
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import migration_verifier
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from migration_verifier.config import VerifierConfig  # noqa: E402


def write_tree(root: Path, files: dict) -> Path:
    """Create files under root from a {relative_path: content} mapping."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, (dict, list)):
            content = json.dumps(content, indent=2)
        path.write_text(content, encoding="utf-8")
    return root


SOURCE_FILES = {
    "package.json": {
        "name": "vite-landing",
        "dependencies": {
            "@radix-ui/react-dialog": "^1.0.0",
            "@radix-ui/react-slot": "~1.0.2",
            "react": "^18.2.0",
        },
    },
    "src/App.css": ":root {\n  --primary: #fff;\n}\n.app { --spacing : 4px; }\n",
    "src/index.css": ":root {\n  --background: #000;\n  --primary: #fff;\n}\n",
    "src/components/Navbar.tsx": "export function Navbar() { return null }\n",
    "src/components/ui/button.tsx": "export function Button() { return null }\n",
    "src/components/ui/index.ts": "export * from './button'\n",
    "src/lib/utils.ts": "export const cn = () => ''\n",
}

TARGET_FILES = {
    "package.json": {
        "name": "tanstack-landing",
        "dependencies": {
            "@radix-ui/react-dialog": "^1.1.2",
            "@radix-ui/react-slot": "^1.1.0",
            "@tanstack/react-router": "^1.0.0",
        },
    },
    "src/styles.css": (
        ":root {\n  --primary: #fff;\n  --background: #000;\n"
        "  --spacing: 4px;\n  --ring: #ccc;\n}\n"
    ),
    "src/components/Navbar.tsx": (
        "import * as React from 'react'\n"
        "import { Button } from '@/components/ui/button'\n"
        "import {\n  cn,\n} from \"@/lib/utils\"\n"
        "export function Navbar() { return null }\n"
    ),
    "src/components/ui/button.tsx": (
        "import { Slot } from '@radix-ui/react-slot'\n"
        "import { cn } from '../../lib/utils'\n"
        "export function Button() { return null }\n"
    ),
    "src/components/ui/index.ts": "export * from './button'\n",
    "src/lib/utils.ts": "export const cn = () => ''\n",
}


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    """A Vite-style source project."""
    return write_tree(tmp_path / "source", SOURCE_FILES)


@pytest.fixture
def target_root(tmp_path: Path) -> Path:
    """A faithful migration of source_root."""
    return write_tree(tmp_path / "target", TARGET_FILES)


@pytest.fixture
def config(source_root: Path, target_root: Path) -> VerifierConfig:
    """Verifier configuration with a fixed seed."""
    return VerifierConfig.from_paths(source_root, target_root, seed=1234)
