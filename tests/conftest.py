import pytest

import typeuri


class _SuiteUtils:
    """Assorted helpers shared by the test modules."""

    @staticmethod
    def make_options(**kwargs):
        options = typeuri.ParseOptions()
        for name, value in kwargs.items():
            setattr(options, name, value)

        return options

    @classmethod
    def create_uri(cls, uri, **option_kwargs):
        options = cls.make_options(**option_kwargs) if option_kwargs else None
        return typeuri.TypeUri(uri, options)


@pytest.fixture(scope='session')
def util():
    return _SuiteUtils()


@pytest.fixture
def trending_uri():
    return typeuri.TypeUri('https://github.com/trending?l=java&since=daily')
