"""Command line interface for the vocabulary flashcard manager"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config.settings import settings
from .core.factory import create_vocabulary_service
from .core.messages import MISSING_ADD_INPUT
from .core.vocabulary_service import NEGATIVE, VocabularyService
from .exceptions import MissingInputError, VocabError
from .logging_config import get_logger, setup_logging
from .models.vocab_entry import Locale

logger = get_logger(__name__)

LANG_HELP = "Language (en or vi) | Ngôn ngữ (en hoặc vi)"


def _add_lang_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--lang",
        choices=Locale.codes(),
        default=settings.default_lang.value,
        help=f"{LANG_HELP} (default: {settings.default_lang.value})",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser"""
    prog_name = Path(sys.argv[0]).name
    parser = argparse.ArgumentParser(
        prog=prog_name,
        description="Personal vocabulary flashcards | Sổ từ vựng cá nhân",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vocab add --word cat --vi "con mèo" --en cat   # Add a word
  vocab list --lang vi                            # List words with Vietnamese meanings
  vocab quiz                                      # Guess the meaning of a random word
  vocab delete cat                                # Delete every entry for "cat"
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Storage options
    storage_group = parser.add_argument_group("storage options")
    storage_group.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help=f"Vocabulary file (default: {settings.storage.data_file})",
    )

    # Logging options
    log_group = parser.add_argument_group("logging options")
    log_group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    log_group.add_argument("--debug", action="store_true", help="Enable debug logging")
    log_group.add_argument("--log-file", type=Path, help="Write logs to file")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    add_parser = subparsers.add_parser(
        "add",
        help="Add a new word (English: Add a new word | Vietnamese: Thêm từ mới)",
        description="Add a new word (English: Add a new word | Vietnamese: Thêm từ mới)",
    )
    add_parser.add_argument("--word", help="The word to add | Từ cần thêm")
    add_parser.add_argument("--vi", help="Vietnamese meaning | Nghĩa tiếng Việt")
    add_parser.add_argument("--en", help="English meaning | Nghĩa tiếng Anh")
    add_parser.set_defaults(handler=run_add)

    list_parser = subparsers.add_parser(
        "list",
        help="List all words (English: List all words | Vietnamese: Liệt kê tất cả từ)",
        description="List all words (English: List all words | Vietnamese: Liệt kê tất cả từ)",
    )
    _add_lang_option(list_parser)
    list_parser.set_defaults(handler=run_list)

    quiz_parser = subparsers.add_parser(
        "quiz",
        help="Start a quiz (English: Start a quiz | Vietnamese: Bắt đầu bài kiểm tra)",
        description="Start a quiz (English: Start a quiz | Vietnamese: Bắt đầu bài kiểm tra)",
    )
    _add_lang_option(quiz_parser)
    quiz_parser.set_defaults(handler=run_quiz)

    delete_parser = subparsers.add_parser(
        "delete",
        help="Delete a word (English: Delete a word | Vietnamese: Xóa một từ)",
        description="Delete a word (English: Delete a word | Vietnamese: Xóa một từ)",
    )
    delete_parser.add_argument("word", help="The word to delete | Từ cần xóa")
    _add_lang_option(delete_parser)
    delete_parser.set_defaults(handler=run_delete)

    return parser


def run_add(service: VocabularyService, args: argparse.Namespace) -> None:
    """Handle the add command"""
    try:
        service.add_word(args.word, args.vi, args.en)
    except MissingInputError as e:
        logger.debug(f"Add aborted: {e}")
        service.console.print(MISSING_ADD_INPUT, style=NEGATIVE, markup=False)


def run_list(service: VocabularyService, args: argparse.Namespace) -> None:
    """Handle the list command"""
    service.list_words(args.lang)


def run_quiz(service: VocabularyService, args: argparse.Namespace) -> None:
    """Handle the quiz command"""
    service.quiz(args.lang)


def run_delete(service: VocabularyService, args: argparse.Namespace) -> None:
    """Handle the delete command"""
    service.delete_word(args.word, args.lang)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI"""
    parser = create_parser()
    argv = sys.argv[1:] if argv is None else argv

    # Handle no arguments case
    if not argv:
        parser.print_help()
        sys.exit(0)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    # Setup logging
    if args.debug:
        log_level = "DEBUG"
    elif args.verbose:
        log_level = "INFO"
    else:
        log_level = settings.logging.level
    log_file = args.log_file or settings.logging.file
    setup_logging(log_level, str(log_file) if log_file else None)

    try:
        service = create_vocabulary_service(data_file=args.data_file)
        logger.debug(f"Running command: {args.command}")
        args.handler(service, args)
    except VocabError as e:
        logger.error(f"Application error: {e}")
        if args.debug or settings.debug:
            logger.exception("Full traceback:")
        sys.exit(1)
    except (KeyboardInterrupt, EOFError):
        logger.warning("Operation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if args.debug or args.verbose:
            logger.exception("Full traceback:")
        sys.exit(1)


if __name__ == "__main__":
    main()
