##########################################################################################
#
# Script name: test_registry.py
#
# Description: Tests the built-in publisher registry and YAML source configuration.
#
##########################################################################################

from pathlib import Path

from news_core.registry import DEFAULT_SOURCES, list_sources, load_source_config


def _write_file(path: Path, content: str) -> None:
    path.write_text(content.strip() + '\n', encoding='utf-8')


def test_default_sources_have_multiple_candidates() -> None:
    sources = list_sources()
    assert sources == list(DEFAULT_SOURCES)
    assert len({source.id for source in sources}) == len(sources)
    for source in sources:
        assert len(source.feeds) >= 2
        assert all(url.startswith('https://') for url in source.feeds)


def test_load_source_config_keeps_candidate_order(tmp_path: Path) -> None:
    yaml_path = tmp_path / 'sources.yaml'
    _write_file(
        yaml_path,
        '''
sources:
  - id: joy
    name: Joy News
    site_url: https://joy.example
    logo: https://joy.example/logo.png
    feeds:
      - https://joy.example/feed/
      - https://joy.example/news/feed/
  - id: citi
    rss: https://citi.example/feed/
        ''',
    )

    sources = load_source_config(str(yaml_path))
    assert [source.id for source in sources] == ['joy', 'citi']
    assert sources[0].feeds == ('https://joy.example/feed/', 'https://joy.example/news/feed/')
    assert sources[0].logo == 'https://joy.example/logo.png'
    assert sources[1].name == 'citi'
    assert sources[1].feeds == ('https://citi.example/feed/',)


def test_load_source_config_skips_invalid_entries(tmp_path: Path) -> None:
    yaml_path = tmp_path / 'sources.yaml'
    _write_file(
        yaml_path,
        '''
sources:
  - name: No Id
    feeds: ['https://noid.example/feed']
  - id: empty
    feeds: []
  - not-a-mapping
  - id: dup
    feeds: ['https://dup.example/a']
  - id: dup
    feeds: ['https://dup.example/b']
        ''',
    )

    sources = load_source_config(str(yaml_path))
    assert [source.id for source in sources] == ['dup']
    assert sources[0].feeds == ('https://dup.example/a',)


def test_list_sources_prefers_existing_file(tmp_path: Path) -> None:
    yaml_path = tmp_path / 'sources.yaml'
    _write_file(yaml_path, 'sources:\n  - id: only\n    feeds: ["https://only.example/feed"]')
    assert [source.id for source in list_sources(str(yaml_path))] == ['only']
    assert list_sources(str(tmp_path / 'missing.yaml')) == list(DEFAULT_SOURCES)


def test_bundled_config_matches_builtin_ids() -> None:
    config_path = Path(__file__).resolve().parent.parent / 'config' / 'sources.yaml'
    sources = load_source_config(str(config_path))
    builtin_ids = {source.id for source in DEFAULT_SOURCES}
    assert sources
    assert {source.id for source in sources} <= builtin_ids
