import logging
import sys

from unit_test_generator.config import load_config
from unit_test_generator.errors import GeneratorError, UnsupportedLanguageError
from unit_test_generator.extractors.extractor_ts import (
    detect_language,
    extract_exports,
)
from unit_test_generator.generator.pipeline import (
    create_file_contents,
    generate_unit_test,
)
from unit_test_generator.generator.targets import get_test_file_target
from unit_test_generator.types import to_json
from unit_test_generator.utils.args import configure_logging, parse_args

logger = logging.getLogger(__name__)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args)

    source_path = args.source
    if not source_path.is_file():
        logger.error("Input file '%s' does not exist.", source_path)
        sys.exit(1)

    try:
        language = detect_language(source_path)
    except UnsupportedLanguageError as e:
        logger.error("%s", e)
        sys.exit(1)

    logger.debug("Language: %s", language.value)
    try:
        config = load_config(source_path, language, args.config)

        if args.dump_exports:
            print(to_json(extract_exports(source_path), indent=2))
            return

        if args.dry_run:
            target = get_test_file_target(source_path, config)
            logger.info("Would write %s", target.path)
            print(create_file_contents(source_path, target), end="")
            return

        target = generate_unit_test(
            source_path, config, force=args.force, open_in_editor=args.open
        )
    except GeneratorError as e:
        if e.is_bypassed:
            logger.info("%s Leaving it untouched.", e.message)
            return
        logger.error("%s", e.message)
        sys.exit(1)

    logger.info("Generated unit test: %s", target.path)


if __name__ == "__main__":
    main()
