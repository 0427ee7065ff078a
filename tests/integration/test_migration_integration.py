import pytest
from unittest.mock import patch, MagicMock
from issuemigrator.migrate import migrate_all_issues

GITEA_URL = 'http://gitea.example.com/api/v1/repos/owner/repo'
GITHUB_URL = 'https://api.github.com/repos/owner/repo/issues'

class FakeForges:
    """In-memory Gitea source and GitHub destination behind requests.get/post/patch."""

    def __init__(self, make_response, gitea_issues, gitea_comments, existing=()):
        self.make_response = make_response
        self.gitea_issues = gitea_issues
        self.gitea_comments = gitea_comments
        self.github_issues = {number: {'number': number, 'state': 'open'} for number in existing}
        self.created = []
        self.patched = []

    def page(self, items, page, size=1):
        return items[(page - 1) * size:page * size]

    def get(self, url, headers=None, params=None):
        if url == f'{GITEA_URL}/issues':
            return self.make_response(200, self.page(self.gitea_issues, params['page']))
        if url == f'{GITEA_URL}/issues/comments':
            return self.make_response(200, self.page(self.gitea_comments, params['page']))
        number = int(url.rsplit('/', 1)[1])
        if number in self.github_issues:
            return self.make_response(200, self.github_issues[number])
        return self.make_response(404, {'message': 'Not Found'})

    def post(self, url, headers=None, json=None):
        number = len(self.github_issues) + 1
        issue = dict(json, number=number, state='open')
        self.github_issues[number] = issue
        self.created.append(issue)
        return self.make_response(201, issue, headers={'x-ratelimit-remaining': '4999'})

    def patch(self, url, headers=None, json=None):
        number = int(url.rsplit('/', 1)[1])
        self.github_issues[number].update(json)
        self.patched.append((number, json))
        return self.make_response(200, self.github_issues[number])

class TestMigrationIntegration:
    """End-to-end migration runs against fake forges."""

    @pytest.fixture
    def gitea_data(self):
        issues = [
            {'number': 2, 'title': 'Second', 'body': 'Broken build', 'state': 'closed',
             'html_url': 'http://gitea.example.com/owner/repo/issues/2', 'assets': []},
            {'number': 1, 'title': 'First', 'body': 'Add docs', 'state': 'open',
             'html_url': 'http://gitea.example.com/owner/repo/issues/1', 'assets': []},
        ]
        comments = [
            {'body': 'fix this', 'user': {'username': 'alice'},
             'issue_url': 'http://gitea.example.com/owner/repo/issues/2'},
        ]
        return issues, comments

    def run(self, forges, config):
        with patch('requests.get', side_effect=forges.get), \
             patch('requests.post', side_effect=forges.post), \
             patch('requests.patch', side_effect=forges.patch), \
             patch('issuemigrator.github.issue.time.sleep') as mock_sleep:
            summary = migrate_all_issues(config)
        return summary, mock_sleep

    def test_migrate_into_empty_repository(self, mock_config, make_response, gitea_data):
        forges = FakeForges(make_response, *gitea_data)

        summary, mock_sleep = self.run(forges, mock_config)

        assert summary == {'total': 2, 'created': 2, 'skipped': 0}
        assert [issue['title'] for issue in forges.created] == ['First', 'Second']

        first = forges.github_issues[1]
        assert first['state'] == 'open'
        assert first['body'].startswith('Add docs\r\n\r\n')
        assert first['body'].endswith('> Original Comments:\r\n> (none)')

        second = forges.github_issues[2]
        assert second['state'] == 'closed'
        assert second['body'].endswith('> Original Comments:\r\n> - alice: fix this')
        assert second['body'].count('- alice: fix this') == 1
        assert 'http://gitea.example.com/owner/repo/issues/2' in second['body']

        assert forges.patched == [(2, {'state': 'closed'})]
        mock_sleep.assert_not_called()

    def test_rerun_skips_existing_issues(self, mock_config, make_response, gitea_data):
        forges = FakeForges(make_response, *gitea_data, existing=(1,))

        summary, _ = self.run(forges, mock_config)

        assert summary == {'total': 2, 'created': 1, 'skipped': 1}
        assert [issue['title'] for issue in forges.created] == ['Second']
        assert forges.patched == [(2, {'state': 'closed'})]
