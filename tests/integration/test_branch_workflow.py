"""Integration tests for branch management workflow."""

from minivcs.cli.main import cli


def commit_file(runner, repo, path, content, message):
    (repo.work_tree / path).write_text(content)
    runner.invoke(cli, ['add', path])
    result = runner.invoke(cli, ['commit', '-m', message])
    assert result.exit_code == 0


def test_branch_requires_commits(runner, in_repo):
    """An empty history cannot be branched."""
    result = runner.invoke(cli, ['branch', 'feature'])

    assert result.exit_code == 0
    assert 'No commits yet' in result.output
    assert not in_repo.refs.branch_exists('feature')


def test_branch_and_list(runner, in_repo):
    """branch creates at HEAD; branches marks the current one."""
    commit_file(runner, in_repo, 'a.txt', 'hello', 'first')
    tip = in_repo.refs.read_branch('main')

    result = runner.invoke(cli, ['branch', 'feature'])
    assert result.exit_code == 0
    assert in_repo.refs.read_branch('feature') == tip

    result = runner.invoke(cli, ['branches'])
    assert f'feature -> {tip}' in result.output
    assert '* ' in result.output
    lines = [line for line in result.output.splitlines() if line.startswith('*')]
    assert len(lines) == 1 and 'main' in lines[0]


def test_branch_already_exists(runner, in_repo):
    """Creating a branch twice is reported."""
    commit_file(runner, in_repo, 'a.txt', 'hello', 'first')
    runner.invoke(cli, ['branch', 'feature'])

    result = runner.invoke(cli, ['branch', 'feature'])

    assert result.exit_code == 0
    assert 'already exists' in result.output


def test_modified_file_listed_as_not_staged(runner, in_repo):
    """Branch, switch back to main, edit a tracked file: it is modified, not staged."""
    repo = in_repo
    commit_file(runner, repo, 'a.txt', 'hello', 'first')
    runner.invoke(cli, ['branch', 'feature'])

    result = runner.invoke(cli, ['switch', 'main'])
    assert result.exit_code == 0

    (repo.work_tree / 'a.txt').write_text('changed')
    result = runner.invoke(cli, ['status'])

    assert result.exit_code == 0
    output = result.output
    assert 'Modified but not staged:' in output
    assert 'No files staged.' in output
    assert output.index('Modified but not staged:') < output.index('a.txt')


def test_switch_between_branches(runner, in_repo):
    """Switching restores each branch tip and keeps HEAD symbolic."""
    repo = in_repo
    commit_file(runner, repo, 'a.txt', 'main version', 'on main')
    runner.invoke(cli, ['branch', 'feature'])
    runner.invoke(cli, ['switch', 'feature'])
    commit_file(runner, repo, 'a.txt', 'feature version', 'on feature')

    result = runner.invoke(cli, ['switch', 'main'])
    assert result.exit_code == 0
    assert 'Switched to branch main' in result.output
    assert (repo.work_tree / 'a.txt').read_text() == 'main version'
    assert repo.head_file.read_text() == 'refs/heads/main\n'

    runner.invoke(cli, ['switch', 'feature'])
    assert (repo.work_tree / 'a.txt').read_text() == 'feature version'
    assert repo.head_file.read_text() == 'refs/heads/feature\n'


def test_switch_missing_branch(runner, in_repo):
    """Unknown branches are reported and HEAD stays put."""
    result = runner.invoke(cli, ['switch', 'nope'])

    assert result.exit_code == 0
    assert 'not found' in result.output
    assert in_repo.head_file.read_text() == 'refs/heads/main\n'
