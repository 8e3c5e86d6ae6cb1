"""Text templates written into Makefiles."""

MAKEFILE_NAME = "Makefile"

# Written verbatim, never passed through the renderer.
BOILERPLATE = """.PHONY: help
## help: shows this help message
help:
\t@ echo "Usage: make [target]\\n"
\t@ sed -n 's/^##//p' ${MAKEFILE_LIST} | column -t -s ':' |  sed -e 's/^/ /'

.PHONY: test
## test: run unit tests
test:
\t@ echo "replace with the command that runs your unit tests"

.PHONY: coverage
## coverage: run unit tests and generate coverage report
coverage:
\t@ echo "replace with the command that produces your coverage report"
"""

_HEADER = """
.PHONY: {name}
## {name}: explain what {name} does
"""

TARGET_TEMPLATE = _HEADER + "{name}:\n"

TARGET_WITH_DEPENDENCIES_TEMPLATE = _HEADER + "{name}: {dependencies}\n"

TARGET_WITH_CONTENT_TEMPLATE = _HEADER + "{name}:\n\t{content}\n"

TARGET_WITH_CONTENT_AND_DEPENDENCIES_TEMPLATE = _HEADER + "{name}: {dependencies}\n\t{content}\n"

# Keyed by (has_content, has_dependencies)
TARGET_TEMPLATES = {
    (False, False): TARGET_TEMPLATE,
    (False, True): TARGET_WITH_DEPENDENCIES_TEMPLATE,
    (True, False): TARGET_WITH_CONTENT_TEMPLATE,
    (True, True): TARGET_WITH_CONTENT_AND_DEPENDENCIES_TEMPLATE,
}


def select_target_template(has_content: bool, has_dependencies: bool) -> str:
    """Pick the target template matching the optional parts that are present."""
    return TARGET_TEMPLATES[(has_content, has_dependencies)]
