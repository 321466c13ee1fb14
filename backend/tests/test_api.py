"""
Tests for the HTTP API.
"""

import uuid
from datetime import datetime, timedelta

from resume_matcher.models import DocumentStatus


class TestMatchingAPI:
    """Test /api/v1/matching."""

    def test_match_resumes(self, client, make_job, make_resume):
        job = make_job("Senior backend engineer Go")
        resume = make_resume(job, "Senior backend engineer Go", candidate_name="Dana")

        response = client.post("/api/v1/matching/match-resumes", json={"jobId": str(job.id), "threshold": 0.6})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["jobId"] == str(job.id)
        assert body["totalResumes"] == 1
        assert body["matchedResumes"] == 1
        assert body["threshold"] == 0.6
        [match] = body["matches"]
        assert match["resumeId"] == str(resume.id)
        assert match["candidateName"] == "Dana"
        assert match["fileName"] == "cv.txt"
        assert abs(match["similarityScore"] - 1.0) < 1e-6

    def test_default_threshold(self, client, make_job):
        job = make_job("Go developer")

        response = client.post("/api/v1/matching/match-resumes", json={"jobId": str(job.id)})

        assert response.status_code == 200
        assert response.json()["threshold"] == 0.6

    def test_unknown_job(self, client):
        response = client.post("/api/v1/matching/match-resumes", json={"jobId": str(uuid.uuid4())})

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Job not found"}

    def test_missing_job_id(self, client):
        response = client.post("/api/v1/matching/match-resumes", json={"threshold": 0.6})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert "jobId" in body["error"]

    def test_threshold_out_of_range(self, client, make_job):
        job = make_job("Go developer")

        response = client.post("/api/v1/matching/match-resumes", json={"jobId": str(job.id), "threshold": 1.5})

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_list_and_delete_matches(self, client, make_job, make_resume):
        job = make_job("Senior backend engineer Go")
        make_resume(job, "Senior backend engineer Go")
        client.post("/api/v1/matching/match-resumes", json={"jobId": str(job.id)})

        listed = client.get(f"/api/v1/matching/jobs/{job.id}/matches")
        assert listed.status_code == 200
        [record] = listed.json()["matches"]
        assert record["isMatch"] is True
        assert record["matchDetails"]["threshold"] == 0.6

        deleted = client.request("DELETE", "/api/v1/matching/matches", json={"ids": [record["id"]]})
        assert deleted.json() == {"success": True, "deleted": 1}

        listed = client.get(f"/api/v1/matching/jobs/{job.id}/matches", params={"include_non_matches": True})
        assert listed.json()["matches"] == []

    def test_list_matches_unknown_job(self, client):
        response = client.get(f"/api/v1/matching/jobs/{uuid.uuid4()}/matches")
        assert response.status_code == 404
        assert response.json()["success"] is False


class TestDocumentsAPI:
    """Test /api/v1/documents."""

    def test_parse(self, client, storage, make_job, make_resume):
        job = make_job("Go developer")
        resume = make_resume(job, None, status=DocumentStatus.PENDING)
        file_url = storage.save_bytes(b"Go\n\ndeveloper", "cv.txt")["file_url"]

        response = client.post("/api/v1/documents/parse", json={
            "fileUrl": file_url,
            "fileType": "text/plain",
            "documentId": str(resume.id),
            "documentType": "resume",
        })

        assert response.status_code == 200
        assert response.json() == {"success": True, "text": "Go developer", "length": 12}

    def test_parse_unsupported_type(self, client, storage, make_job, make_resume):
        job = make_job("Go developer")
        resume = make_resume(job, "existing text")
        file_url = storage.save_bytes(b"\x89PNG", "photo.png")["file_url"]

        response = client.post("/api/v1/documents/parse", json={
            "fileUrl": file_url,
            "fileType": "image/png",
            "documentId": str(resume.id),
            "documentType": "resume",
        })

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Unsupported file type: image/png"}

    def test_parse_unknown_document_type(self, client):
        response = client.post("/api/v1/documents/parse", json={
            "fileUrl": "/uploads/cv.txt",
            "fileType": "txt",
            "documentId": str(uuid.uuid4()),
            "documentType": "invoice",
        })

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_parse_malformed_url(self, client, db_session, make_job, make_resume):
        job = make_job("Go developer")
        resume = make_resume(job, None, status=DocumentStatus.PENDING)

        response = client.post("/api/v1/documents/parse", json={
            "fileUrl": "http://[bad/cv.txt",
            "fileType": "txt",
            "documentId": str(resume.id),
            "documentType": "resume",
        })

        assert response.status_code == 502
        assert response.json()["success"] is False
        db_session.expire_all()
        assert resume.status == DocumentStatus.FAILED

    def test_upload_then_parse(self, client):
        response = client.post(
            "/api/v1/documents/upload",
            files={"file": ("jd.txt", b"Senior backend\nengineer", "text/plain")},
            data={"documentType": "job"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["fileUrl"].startswith("/uploads/jobs/")
        assert body["fileName"] == "jd.txt"
        assert body["fileType"] == "text/plain"
        assert body["fileSize"] == 23

        job = client.post("/api/v1/jobs", json={
            "title": "Backend Engineer",
            "fileUrl": body["fileUrl"],
            "fileName": body["fileName"],
            "fileType": body["fileType"],
        }).json()
        parsed = client.post("/api/v1/documents/parse", json={
            "fileUrl": body["fileUrl"],
            "fileType": body["fileType"],
            "documentId": job["id"],
            "documentType": "job",
        })
        assert parsed.json()["text"] == "Senior backend engineer"

    def test_upload_rejects_unsupported_type(self, client):
        response = client.post(
            "/api/v1/documents/upload",
            files={"file": ("photo.png", b"\x89PNG", "image/png")},
            data={"documentType": "resume"},
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Unsupported file type: image/png"}

    def test_upload_rejects_oversized_file(self, client, monkeypatch):
        from resume_matcher.core.config import settings

        monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 4)
        response = client.post(
            "/api/v1/documents/upload",
            files={"file": ("cv.txt", b"Go developer", "text/plain")},
            data={"documentType": "resume"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_parse_missing_document(self, client):
        response = client.post("/api/v1/documents/parse", json={
            "fileUrl": "/uploads/cv.txt",
            "fileType": "txt",
            "documentId": str(uuid.uuid4()),
            "documentType": "job",
        })

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Job not found"}


class TestRecordsAPI:
    """Test /api/v1/jobs and /api/v1/resumes."""

    def test_create_job_and_resume(self, client):
        response = client.post("/api/v1/jobs", json={
            "title": "Backend Engineer",
            "fileUrl": "/uploads/jd.pdf",
            "fileName": "jd.pdf",
            "fileType": "application/pdf",
        })
        assert response.status_code == 201
        job = response.json()
        assert job["status"] == "pending"
        assert job["title"] == "Backend Engineer"

        response = client.post("/api/v1/resumes", json={
            "jobId": job["id"],
            "candidateName": "Dana",
            "fileUrl": "/uploads/cv.pdf",
            "fileName": "cv.pdf",
            "fileType": "pdf",
        })
        assert response.status_code == 201
        assert response.json()["jobId"] == job["id"]

        fetched = client.get(f"/api/v1/jobs/{job['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["fileName"] == "jd.pdf"

    def test_create_resume_for_unknown_job(self, client):
        response = client.post("/api/v1/resumes", json={
            "jobId": str(uuid.uuid4()),
            "fileUrl": "/uploads/cv.pdf",
            "fileName": "cv.pdf",
            "fileType": "pdf",
        })
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Job not found"}

    def test_delete_job(self, client, make_job):
        job = make_job("Go developer")

        assert client.delete(f"/api/v1/jobs/{job.id}").json() == {"success": True, "deleted": 1}
        assert client.get(f"/api/v1/jobs/{job.id}").status_code == 404
        assert client.delete(f"/api/v1/jobs/{job.id}").status_code == 404

    def test_delete_resumes(self, client, make_job, make_resume):
        job = make_job("Go developer")
        first = make_resume(job, "a")
        second = make_resume(job, "b")

        response = client.request("DELETE", "/api/v1/resumes", json={"ids": [str(first.id), str(second.id)]})
        assert response.json() == {"success": True, "deleted": 2}

    def test_list_jobs_newest_first(self, client, make_job):
        base = datetime(2025, 12, 22, 9, 0, 0)
        make_job("a", title="Older", created_at=base)
        make_job("b", title="Newer", created_at=base + timedelta(hours=1))

        response = client.get("/api/v1/jobs")

        assert response.status_code == 200
        assert [j["title"] for j in response.json()["jobs"]] == ["Newer", "Older"]
        assert [j["title"] for j in client.get("/api/v1/jobs", params={"limit": 1}).json()["jobs"]] == ["Newer"]

    def test_bulk_delete_jobs(self, client, make_job, make_resume):
        first = make_job("a")
        second = make_job("b")
        kept = make_job("c")
        make_resume(first, "Go developer")

        response = client.request("DELETE", "/api/v1/jobs", json={"ids": [str(first.id), str(second.id)]})

        assert response.json() == {"success": True, "deleted": 2}
        assert [j["id"] for j in client.get("/api/v1/jobs").json()["jobs"]] == [str(kept.id)]

    def test_bulk_delete_jobs_requires_ids(self, client):
        response = client.request("DELETE", "/api/v1/jobs", json={"ids": []})
        assert response.status_code == 400

    def test_list_job_resumes(self, client, make_job, make_resume):
        job = make_job("Go developer")
        other = make_job("Pastry chef")
        base = datetime(2025, 12, 22, 9, 0, 0)
        make_resume(job, "a", candidate_name="First", created_at=base)
        make_resume(job, "b", candidate_name="Second", created_at=base + timedelta(minutes=1))
        make_resume(other, "c", candidate_name="Elsewhere")

        response = client.get(f"/api/v1/jobs/{job.id}/resumes")

        assert response.status_code == 200
        body = response.json()
        assert body["jobId"] == str(job.id)
        assert [r["candidateName"] for r in body["resumes"]] == ["Second", "First"]

    def test_list_resumes_unknown_job(self, client):
        response = client.get(f"/api/v1/jobs/{uuid.uuid4()}/resumes")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Job not found"}

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"
