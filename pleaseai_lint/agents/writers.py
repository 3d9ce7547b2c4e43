"""Write generated rules into per-agent files."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from pleaseai_lint.agents.registry import (
    AgentDescriptor,
    AgentName,
    agent_descriptor,
    render_header,
)
from pleaseai_lint.constants import MARKER_END, MARKER_START
from pleaseai_lint.guidelines.generator import GeneratorOptions
from pleaseai_lint.guidelines.renderer import generate_rules_content
from pleaseai_lint.models import NormalizedConfig

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def with_header(header: Optional[str], rules_content: str) -> str:
    return f"{header}\n\n{rules_content}" if header else rules_content


def marker_block(rules_content: str) -> str:
    return f"{MARKER_START}\n{rules_content}\n{MARKER_END}"


def splice_marker_block(existing: str, rules_content: str) -> str:
    """Replace the marked region of ``existing`` or append a new one.

    Text outside a well-formed marker pair is kept byte-for-byte. When the
    end marker is missing or precedes the start marker, the old region is
    left alone and a fresh block is appended.
    """
    block = marker_block(rules_content)
    start = existing.find(MARKER_START)
    if start == -1:
        return f"{existing}\n\n{block}"

    end = existing.find(MARKER_END)
    if end > start:
        before = existing[:start]
        after = existing[end + len(MARKER_END) :]
        return f"{before}{block}{after}"

    logger.warning("malformed marker region, appending a new block")
    return f"{existing}\n\n{block}"


class IAgentWriter(ABC):
    @abstractmethod
    def update(self, path: Path, header: Optional[str], rules_content: str) -> None:
        """Refresh ``path`` with ``rules_content`` according to the merge mode."""

    def create(self, path: Path, header: Optional[str], rules_content: str) -> None:
        write_text(path, with_header(header, rules_content))


class OverwriteAgentWriter(IAgentWriter):
    """Replace the whole file on every update."""

    def update(self, path: Path, header: Optional[str], rules_content: str) -> None:
        self.create(path, header, rules_content)


class MarkerAgentWriter(IAgentWriter):
    """Splice rules between markers, keeping user content around them."""

    def update(self, path: Path, header: Optional[str], rules_content: str) -> None:
        # header is only written by create()
        if not path.exists():
            write_text(path, marker_block(rules_content))
            return
        write_text(path, splice_marker_block(read_text(path), rules_content))


def writer_for(descriptor: AgentDescriptor) -> IAgentWriter:
    return MarkerAgentWriter() if descriptor.append_mode else OverwriteAgentWriter()


@dataclass
class AgentHandle:
    descriptor: AgentDescriptor
    root: Path
    rules_content: str
    header: Optional[str]
    writer: IAgentWriter

    @property
    def name(self) -> str:
        return self.descriptor.name.value

    @property
    def target_path(self) -> Path:
        return self.root / self.descriptor.path

    def get_path(self) -> str:
        return self.descriptor.path

    def exists(self) -> bool:
        return self.target_path.exists()

    def content(self) -> str:
        return with_header(self.header, self.rules_content)

    def create(self) -> None:
        logger.debug("create %s -> %s", self.name, self.target_path)
        self.writer.create(self.target_path, self.header, self.rules_content)

    def update(self) -> None:
        logger.debug("update %s -> %s", self.name, self.target_path)
        self.writer.update(self.target_path, self.header, self.rules_content)


def create_agent(
    name: AgentName | str,
    config: NormalizedConfig,
    root: Path,
    generator_options: Optional[GeneratorOptions] = None,
    file_patterns: Sequence[str] = (),
    generated_at: Optional[str] = None,
) -> AgentHandle:
    descriptor = agent_descriptor(name)
    return AgentHandle(
        descriptor=descriptor,
        root=root,
        rules_content=generate_rules_content(
            config, generator_options, generated_at=generated_at
        ),
        header=render_header(descriptor, file_patterns),
        writer=writer_for(descriptor),
    )
