"""Builders for GitHub webhook payloads, trimmed to what we use."""

import copy


def sender(login="alice"):
    return {
        "login": login,
        "html_url": f"https://github.com/{login}",
        "avatar_url": f"https://avatars.githubusercontent.com/{login}",
    }


def repository(full_name="org/repo"):
    return {
        "name": full_name.split("/")[1],
        "full_name": full_name,
        "html_url": f"https://github.com/{full_name}",
    }


def issues_event(action="opened", **issue_fields):
    issue = {
        "number": 42,
        "title": "Bug",
        "body": None,
        "state": "open",
        "html_url": "https://github.com/org/repo/issues/42",
        "labels": [],
        "assignees": [],
    }
    issue.update(issue_fields)
    return {
        "action": action,
        "issue": issue,
        "repository": repository(),
        "sender": sender(),
    }


def commit(sha, message, author="Alice", added=(), modified=(), removed=()):
    return {
        "id": sha,
        "message": message,
        "author": {"name": author, "email": f"{author.lower()}@example.com"},
        "url": f"https://github.com/org/repo/commit/{sha}",
        "added": list(added),
        "modified": list(modified),
        "removed": list(removed),
    }


def push_event(commits, ref="refs/heads/main", **fields):
    event = {
        "ref": ref,
        "before": "0" * 40,
        "after": commits[-1]["id"] if commits else "0" * 40,
        "compare": "https://github.com/org/repo/compare/000000...abcdef",
        "commits": copy.deepcopy(commits),
        "repository": repository(),
        "sender": sender(),
    }
    event.update(fields)
    return event


def workflow_run_event(action="completed", **run_fields):
    run = {
        "id": 1001,
        "name": "CI",
        "status": "completed",
        "conclusion": "success",
        "html_url": "https://github.com/org/repo/actions/runs/1001",
        "head_branch": "main",
        "created_at": "2024-05-01T12:00:00Z",
        "run_started_at": "2024-05-01T12:00:30Z",
        "updated_at": "2024-05-01T12:03:35Z",
    }
    run.update(run_fields)
    return {
        "action": action,
        "workflow_run": run,
        "repository": repository(),
        "sender": sender(),
    }


def workflow_job_event(action="completed", **job_fields):
    job = {
        "id": 2002,
        "name": "tests",
        "status": "completed",
        "conclusion": "failure",
        "html_url": "https://github.com/org/repo/actions/runs/1001/job/2002",
        "started_at": "2024-05-01T12:00:00Z",
        "completed_at": "2024-05-01T12:00:42Z",
        "runner_name": "ubuntu-runner-3",
        "steps": [],
    }
    job.update(job_fields)
    return {
        "action": action,
        "workflow_job": job,
        "repository": repository(),
        "sender": sender(),
    }
