"""
Core help document: configuration surface and section assembly.
"""

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Union

from .formatters import INDENT, OptionFormatter
from .getopt import resolve_option
from .markup import bold, underline
from .options import OptionRecord
from ..log_lib import get_output, trace


NO_HELP = "No help available."

Resolver = Callable[[str, str], OptionRecord]


class HelpDocument:
    """
    The help information for one command.

    Holds the summary, usage lines, long description and raw option specs
    for a command and renders them on request. Option specs stay raw until
    render time, when each one goes through the resolver. Rendering never
    mutates the document, so a configured document can be rendered from
    several threads at once.

    Usage::

        doc = HelpDocument()
        doc.set_summary("Deploy the application")
        doc.set_usage("[options] <env>")
        doc.set_options({'f,force': 'Skip confirmation'})
        print(doc.render('deploy'), end='')
    """

    def __init__(self, resolver: Optional[Resolver] = None):
        """
        Initialize an empty help document.

        Args:
            resolver: Callable turning (spec, description) into an
                OptionRecord; defaults to the getopt-style resolver
        """
        self.resolver: Resolver = resolver or resolve_option
        self.summary: str = ''
        self.usage: List[str] = []
        self.descr: str = ''
        self.options: Dict[str, str] = {}

    @classmethod
    def from_dict(cls, data: Mapping, resolver: Optional[Resolver] = None) -> 'HelpDocument':
        """
        Build a document from a declarative mapping.

        Recognized keys: ``summary``, ``usage``, ``descr`` and ``options``.
        Missing keys leave the field empty; unknown keys are ignored.
        """
        return build_help(
            summary=data.get('summary'),
            usage=data.get('usage'),
            descr=data.get('descr'),
            options=data.get('options'),
            resolver=resolver,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_options(self, options: Optional[Mapping[str, str]]) -> None:
        """Replace the option specs (spec string -> description)."""
        self.options = dict(options or {})

    def get_options(self) -> Dict[str, str]:
        return dict(self.options)

    def set_summary(self, summary: Optional[str]) -> None:
        self.summary = summary or ''

    def get_summary(self) -> str:
        return self.summary

    def set_usage(self, usage: Union[str, Iterable[str], None]) -> None:
        """Replace the usage lines; a single string becomes one line."""
        if usage is None:
            self.usage = []
        elif isinstance(usage, str):
            self.usage = [usage]
        else:
            self.usage = list(usage)

    def get_usage(self) -> List[str]:
        return list(self.usage)

    def set_descr(self, descr: Optional[str]) -> None:
        self.descr = descr or ''

    def get_descr(self) -> str:
        return self.descr

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    @trace
    def render(self, name: str) -> str:
        """
        Render the full help text for a command.

        Sections appear in the order SUMMARY, USAGE, DESCRIPTION, OPTIONS;
        empty ones are left out entirely. The result ends with exactly one
        newline.

        Args:
            name: The command name as invoked

        Returns:
            The help text, or "No help available." when every section is empty
        """
        text = (self.format_summary(name)
                + self.format_usage(name)
                + self.format_descr()
                + self.format_options()).rstrip()

        if not text:
            text = NO_HELP

        get_output().emit(2, "Rendered help for {name}: {lines} lines",
                          channel='render', name=name,
                          lines=text.count("\n") + 1)
        return text + "\n"

    def format_summary(self, name: str) -> str:
        if not self.summary:
            return ''
        return (bold('SUMMARY') + "\n"
                + f"{INDENT}{bold(name)} -- {self.summary}\n\n")

    def format_usage(self, name: str) -> str:
        if not self.usage:
            return ''
        lines = [bold('USAGE')]
        for usage in self.usage:
            lines.append(f"{INDENT}{underline(name)} {usage}")
        return "\n".join(lines) + "\n\n"

    def format_descr(self) -> str:
        if not self.descr:
            return ''
        return bold('DESCRIPTION') + "\n" + INDENT + self.descr.strip() + "\n\n"

    def format_options(self) -> str:
        """
        Format the OPTIONS section.

        Specs are resolved here, once per render and in declaration order.
        Each option block is followed by a blank line; the one after the
        last block is removed by the trailing strip in render().
        """
        if not self.options:
            return ''
        records = [self.resolver(spec, descr) for spec, descr in self.options.items()]
        get_output().emit(2, "Resolved {count} option(s)",
                          channel='render', count=len(records))
        return bold('OPTIONS') + "\n" + "".join(OptionFormatter.format_list(records))


def build_help(summary: Optional[str] = None,
               usage: Union[str, Iterable[str], None] = None,
               descr: Optional[str] = None,
               options: Optional[Mapping[str, str]] = None,
               resolver: Optional[Resolver] = None) -> HelpDocument:
    """
    Build a pre-filled HelpDocument.

    Commands call this from their ``help_document()`` factory instead of
    subclassing HelpDocument.
    """
    doc = HelpDocument(resolver=resolver)
    doc.set_summary(summary)
    doc.set_usage(usage)
    doc.set_descr(descr)
    doc.set_options(options)
    return doc
