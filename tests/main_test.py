from __future__ import annotations

import logging
from unittest import mock

import pytest
from typer.testing import CliRunner

from merge_uses.exceptions import FormatterError
from merge_uses.main import app


@pytest.fixture
def runner():
    return CliRunner()


def test_skip_rustfmt(runner):
    result = runner.invoke(app, ['--skip-rustfmt'], input='use b;\nuse a;\n')
    assert result.exit_code == 0
    assert result.stdout == 'use {a, b};\n'


def test_passes_output_through_rustfmt(runner):
    with mock.patch(
            'merge_uses.main.run_rustfmt', return_value='formatted\n',
    ) as run_rustfmt:
        result = runner.invoke(
            app, ['--', '--edition', '2021'], input='use b;\nuse a;\n',
        )
    assert result.exit_code == 0
    assert result.stdout == 'formatted\n'
    run_rustfmt.assert_called_once_with(
        'use {a, b};\n', ('--edition', '2021'),
    )


def test_split_roots(runner):
    result = runner.invoke(
        app,
        ['--skip-rustfmt', '--split-roots'],
        input='use tokio::b;\nuse serde::a;\n',
    )
    assert result.exit_code == 0
    assert result.stdout == 'use serde::a;\nuse tokio::b;\n'


def test_application_crate(runner):
    result = runner.invoke(
        app,
        ['--skip-rustfmt', '--application-crate', 'my_crate'],
        input='use my_crate::a;\nuse serde::b;\n',
    )
    assert result.exit_code == 0
    assert result.stdout == 'use serde::b;\n\nuse my_crate::a;\n'


def test_unsupported_use_exits_non_zero(runner):
    result = runner.invoke(
        app, ['--skip-rustfmt'], input='#[cfg(test)]\nuse a;\n',
    )
    assert result.exit_code == 1
    assert 'decorated use declarations are not supported' in result.output


def test_formatter_failure_exits_non_zero(runner):
    with mock.patch(
            'merge_uses.main.run_rustfmt',
            side_effect=FormatterError(('rustfmt',), returncode=1),
    ):
        result = runner.invoke(app, [], input='use a;\n')
    assert result.exit_code == 1
    assert 'rustfmt failed with exit status 1' in result.output


def test_verbose(runner):
    with mock.patch.object(logging, 'basicConfig') as basic_config:
        result = runner.invoke(
            app, ['--skip-rustfmt', '--verbose'], input='use b;\nuse a;\n',
        )
    basic_config.assert_called_once_with(level=logging.DEBUG)
    assert result.exit_code == 0
    assert result.stdout == 'use {a, b};\n'
