def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import langpack.core.interfaces as I

    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "StringStoreProtocol")
    assert hasattr(I, "TemplateEngineProtocol")


def test_default_implementations_satisfy_protocols(tmp_path):
    import logging

    from langpack import LanguagePackage, PlaceholderTemplateEngine
    from langpack.core.interfaces import (
        LoggerLikeProtocol,
        StringStoreProtocol,
        TemplateEngineProtocol,
    )
    from langpack.io.language_file import LanguageFile
    from langpack.languages import Language

    assert isinstance(LanguagePackage(tmp_path, "messages"), StringStoreProtocol)
    assert isinstance(LanguageFile(tmp_path / "m_en.yml", Language.ENGLISH), StringStoreProtocol)
    assert isinstance(PlaceholderTemplateEngine(), TemplateEngineProtocol)
    assert isinstance(logging.getLogger("langpack.test"), LoggerLikeProtocol)


class _RecordingLogger:
    def __init__(self):
        self.records = []

    def debug(self, msg, *args, **kwargs):
        self.records.append(("debug", msg % args))

    def info(self, msg, *args, **kwargs):
        self.records.append(("info", msg % args))

    def warning(self, msg, *args, **kwargs):
        self.records.append(("warning", msg % args))

    def error(self, msg, *args, **kwargs):
        self.records.append(("error", msg % args))


def test_resolver_accepts_any_logger_like_object():
    from langpack.core.interfaces import LoggerLikeProtocol
    from langpack.processing.placeholder_resolver import PlaceholderResolver

    class _Store:
        def lookup(self, key, language):
            return {"loop": "again {{loop}}"}.get(key.lower())

    log = _RecordingLogger()
    assert isinstance(log, LoggerLikeProtocol)
    resolver = PlaceholderResolver(logger=log)
    assert resolver.expand_key("loop", _Store()) == "again loop"
    assert [level for level, _ in log.records] == ["warning"]
    assert "cyclic reference" in log.records[0][1]


def test_template_engine_render():
    from langpack import PlaceholderTemplateEngine

    engine = PlaceholderTemplateEngine()
    assert engine.render("Hi {{name}}{{if:admin: (admin)}}", {"name": "Jo", "admin": True}) == "Hi Jo(admin)"
    assert engine.render("{{missing}}", {}) == "missing"


def test_template_engine_never_raises():
    from langpack import PlaceholderTemplateEngine

    engine = PlaceholderTemplateEngine()
    assert engine.render("{{x}}", {"x": ["not", "a", "scalar"]}) == "{{x}}"
