"""
The RIFT stage pipeline.

Runs RIFT-0 (tokenizer) -> RIFT-1 (parser) -> RIFT-2 (AST coordinator) ->
RIFT-3 (output) strictly in order, each stage configured from its own
governance store. No stage starts before the previous one has finished and
no stage goes back to an earlier one.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .diagnostics import RiftError
from .governance import (
    GovernanceStore, load_governance, TokenizerSettings, ParserSettings,
    CoordinatorSettings, OutputSettings
)
from .lexer import Tokenizer, TokenStream
from .parser import ASTNode, Parser
from .optimizer import ASTCoordinator, CoordinationResult
from .output import OutputStage, RenderedOutput

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything one pipeline run produced."""
    source: str
    tokens: TokenStream
    ast: Optional[ASTNode]
    coordination: CoordinationResult
    rendered: RenderedOutput
    diagnostics: List[object] = field(default_factory=list)

    @property
    def output(self) -> str:
        return self.rendered.text

    @property
    def json(self) -> Optional[str]:
        return self.rendered.json

    @property
    def dot(self) -> Optional[str]:
        return self.rendered.dot

    @property
    def node_count(self) -> int:
        return self.coordination.node_count

    @property
    def errors(self) -> List[RiftError]:
        return [d for d in self.diagnostics
                if isinstance(d, RiftError) and d.diagnostic.severity == "error"]

    @property
    def warnings(self) -> List[object]:
        return [d for d in self.diagnostics if d not in self.errors]

    def has_errors(self) -> bool:
        return len(self.errors) > 0


class Pipeline:
    """
    Builds all four stage processors from governance and runs them.

    Args:
        governance: Per-stage stores to use instead of the built-in records
        strict: Build the parser in strict mode
        reject_empty: Make the tokenizer reject blank input

    Raises:
        ConfigurationError: If any stage's configuration is unusable
    """

    def __init__(self, governance: Optional[Mapping[int, GovernanceStore]] = None,
                 strict: bool = False, reject_empty: bool = False):
        self.governance: Dict[int, GovernanceStore] = load_governance(governance)

        self.tokenizer_settings = TokenizerSettings.from_store(self.governance[0])
        self.parser_settings = ParserSettings.from_store(self.governance[1])
        self.coordinator_settings = CoordinatorSettings.from_store(self.governance[2])
        self.output_settings = OutputSettings.from_store(self.governance[3])

        self.tokenizer = Tokenizer.from_settings(self.tokenizer_settings, reject_empty=reject_empty)
        self.parser = Parser(self.parser_settings, strict=strict)
        self.coordinator = ASTCoordinator.from_settings(self.coordinator_settings)
        self.output_stage = OutputStage(self.output_settings)

    def _announce(self, stage_id: int):
        store = self.governance[stage_id]
        logger.info("[RIFT-%d] %s (SP alignment: %s, governance %s)",
                    stage_id, store.stage_name, store.sp_alignment, store.governance_version)

    def run(self, source: str) -> PipelineResult:
        """
        Run every stage over one line of source.

        Raises:
            EmptyInputError: If reject_empty is set and the source is blank
            UnclassifiedTokenError: If stage 0 has error recovery disabled
            MalformedExpressionError: If the parser is strict
        """
        diagnostics: List[object] = []

        self._announce(0)
        tokens = self.tokenizer.tokenize(source)
        diagnostics.extend(self.tokenizer.get_diagnostics())
        logger.info("Tokenization complete: %d tokens", len(tokens))

        self._announce(1)
        ast = self.parser.parse(tokens)
        diagnostics.extend(self.parser.errors)
        if not self.parser.at_end():
            logger.warning("%d trailing token(s) ignored after the expression",
                           len(tokens) - self.parser.position)

        self._announce(2)
        coordination = self.coordinator.coordinate(ast)

        self._announce(3)
        rendered = self.output_stage.generate(coordination.root)

        for diagnostic in diagnostics:
            logger.debug("%s", diagnostic)

        return PipelineResult(
            source=source,
            tokens=tokens,
            ast=coordination.root,
            coordination=coordination,
            rendered=rendered,
            diagnostics=diagnostics,
        )


def compile_string(source: str, governance: Optional[Mapping[int, GovernanceStore]] = None,
                   strict: bool = False) -> PipelineResult:
    """
    Convenience function to run the full pipeline over a string.

    Args:
        source: One line of source text
        governance: Optional per-stage stores overriding the built-ins
        strict: Raise on malformed expressions instead of recording them

    Returns:
        PipelineResult
    """
    return Pipeline(governance, strict=strict).run(source)
