"""
Target platform detection and target triple parsing.

The only target property the primitive values depend on is the pointer
width, which fixes the range of `isize` and `usize`.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from llvmlite import binding as llvm

TARGET_TRIPLE_ENV = "PRIMVAL_TARGET_TRIPLE"

ARCH_POINTER_WIDTHS = {
    'x86_64': 64, 'amd64': 64, 'arm64': 64, 'aarch64': 64, 'riscv64': 64,
    'powerpc64': 64, 'powerpc64le': 64, 's390x': 64, 'mips64': 64, 'mips64el': 64,
    'loongarch64': 64, 'sparcv9': 64, 'wasm64': 64,
    'i386': 32, 'i486': 32, 'i586': 32, 'i686': 32, 'x86': 32, 'arm': 32, 'armv7': 32,
    'thumbv7': 32, 'riscv32': 32, 'powerpc': 32, 'mips': 32, 'mipsel': 32, 'wasm32': 32,
    'avr': 16, 'msp430': 16,
}


@dataclass(frozen=True)
class TargetPlatform:
    """Represents a compilation target platform."""
    arch: str      # arm64, x86_64, riscv64, etc.
    vendor: str    # apple, pc, unknown, etc.
    os: str        # darwin, linux, windows, etc.
    abi: str       # (empty), gnu, musl, etc.

    @property
    def pointer_width(self) -> int:
        """Pointer width in bits; 64 when the architecture is not recognized."""
        width = ARCH_POINTER_WIDTHS.get(self.arch)
        if width is None and self.arch.startswith(('armv', 'thumbv')):
            width = 32
        return width or 64

    @property
    def triple(self) -> str:
        """Reconstruct the target triple string."""
        parts = [self.arch, self.vendor, self.os]
        if self.abi:
            parts.append(self.abi)
        return '-'.join(parts)


def parse_triple(triple: str) -> TargetPlatform:
    """
    Parse an LLVM target triple into components.

    Examples:
        arm64-apple-darwin25.0.0 -> TargetPlatform(arm64, apple, darwin, '')
        x86_64-pc-linux-gnu -> TargetPlatform(x86_64, pc, linux, gnu)
        i686-pc-windows-msvc -> TargetPlatform(i686, pc, windows, msvc)
    """
    parts = triple.split('-')

    # Handle version numbers in OS (e.g., darwin25.0.0)
    os_part = parts[2] if len(parts) > 2 else 'unknown'
    if '.' in os_part:
        os_part = os_part.split('.')[0]
    if os_part.startswith('darwin'):
        os_part = 'darwin'

    return TargetPlatform(
        arch=parts[0] if len(parts) > 0 and parts[0] else 'unknown',
        vendor=parts[1] if len(parts) > 1 else 'unknown',
        os=os_part,
        abi=parts[3] if len(parts) > 3 else '',
    )


def get_current_platform(triple: Optional[str] = None) -> TargetPlatform:
    """Platform for `triple`, else $PRIMVAL_TARGET_TRIPLE, else the host."""
    triple = triple or os.environ.get(TARGET_TRIPLE_ENV) or llvm.get_default_triple()
    return parse_triple(triple)
