from pytest_archon import archrule


def test_no_transport_dependencies() -> None:
    """
    Options are plain values handed to the query execution layer.
    Sending them over the wire is not this package's concern.
    """
    (
        archrule("no_transport")
        .match("spellcheck_options*")
        .should_not_import("requests*")
        .should_not_import("httpx*")
        .should_not_import("aiohttp*")
        .should_not_import("urllib*")
        .check("spellcheck_options")
    )


def test_vocabulary_isolation() -> None:
    """
    Parameter names and parameter storage are the lowest level.
    They must not import the options builder.
    """
    (
        archrule("vocabulary_isolation")
        .match("spellcheck_options.params")
        .match("spellcheck_options.parameters")
        .should_not_import("spellcheck_options.options")
        .check("spellcheck_options")
    )
