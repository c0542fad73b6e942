from uuid import uuid4

import pytest

API = "/api/v1"


@pytest.fixture
def books(client, catalog):
    """Assign the BBA structure to both BBA students over HTTP."""
    response = client.post(
        f"{API}/fees/assignments",
        json={
            "fee_structure_id": str(catalog.structure.id),
            "selection": {"course_id": str(catalog.bba.id)},
            "due_date": "2024-07-31",
        },
    )
    assert response.status_code == 201, response.text
    return catalog


def _asha_tuition(client, catalog):
    rows = client.get(f"{API}/students/{catalog.asha.id}/fee-payments").json()
    return next(r for r in rows if r["fee_structure_component_id"] == str(catalog.tuition_component.id))


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_university_crud(client):
    created = client.post(f"{API}/universities", json={"name": "Hillcrest University"})
    assert created.status_code == 201
    university_id = created.json()["id"]

    assert client.get(f"{API}/universities/{university_id}").json()["name"] == "Hillcrest University"

    renamed = client.patch(f"{API}/universities/{university_id}", json={"name": "Hillcrest College"})
    assert renamed.json()["name"] == "Hillcrest College"

    assert [u["name"] for u in client.get(f"{API}/universities").json()] == ["Hillcrest College"]

    assert client.delete(f"{API}/universities/{university_id}").status_code == 204
    assert client.get(f"{API}/universities/{university_id}").status_code == 404


def test_error_envelope(client, catalog):
    missing = client.get(f"{API}/students/{uuid4()}")
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "RESOURCE_NOT_FOUND"

    duplicate = client.post(f"{API}/fees/types", json={"name": "Tuition Fee", "amount": "1"})
    assert duplicate.status_code == 409
    assert duplicate.json()["error"]["code"] == "DUPLICATE_ENTRY"

    invalid = client.post(f"{API}/fees/types", json={"amount": "-5"})
    assert invalid.status_code == 422
    body = invalid.json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"]["errors"]


def test_list_filters_are_coerced(client, catalog):
    response = client.get(f"{API}/students", params={"course_id": str(catalog.mba.id)})

    assert response.status_code == 200
    assert [s["first_name"] for s in response.json()] == ["Meera"]


def test_fee_type_in_use_cannot_be_deleted(client, catalog):
    response = client.delete(f"{API}/fees/types/{catalog.tuition.id}")

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "RESOURCE_IN_USE"


def test_assignment_and_payment_flow(client, books):
    tuition = _asha_tuition(client, books)
    assert tuition["amount_due"] == "15000.00"
    assert tuition["payment_status"] == "pending"

    paid = client.patch(
        f"{API}/fees/payments/{tuition['id']}",
        json={"amount_paid": "7000", "expected_version": tuition["version"]},
    )
    assert paid.status_code == 200, paid.text
    assert paid.json()["payment_status"] == "partial"
    assert paid.json()["balance"] == "8000.00"

    stale = client.patch(
        f"{API}/fees/payments/{tuition['id']}",
        json={"amount_paid": "9000", "expected_version": tuition["version"]},
    )
    assert stale.status_code == 409
    assert stale.json()["error"]["code"] == "CONCURRENT_MODIFICATION"

    summary = client.get(f"{API}/students/{books.asha.id}/financial-summary").json()
    assert summary["total_fees"] == "17000.00"
    assert summary["paid_amount"] == "7000.00"
    assert summary["pending_amount"] == "10000.00"


def test_negative_payment_is_unprocessable(client, books):
    tuition = _asha_tuition(client, books)

    response = client.patch(f"{API}/fees/payments/{tuition['id']}", json={"amount_paid": "-1"})

    assert response.status_code == 422
    assert response.json()["error"]["details"]["field"] == "amount_paid"


def test_repeat_assignment_is_skipped(client, books):
    response = client.post(
        f"{API}/fees/assignments",
        json={
            "fee_structure_id": str(books.structure.id),
            "selection": {"student_ids": [str(books.asha.id)]},
        },
    )

    assert response.status_code == 201
    assert response.json()["created_count"] == 0
    assert response.json()["skipped_count"] == 2


def test_empty_selection_is_rejected(client, catalog):
    response = client.post(f"{API}/fees/assignments", json={"fee_structure_id": str(catalog.structure.id)})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "EMPTY_SELECTION"


def test_custom_amount(client, books):
    response = client.put(
        f"{API}/fees/customizations",
        json={
            "student_id": str(books.asha.id),
            "fee_structure_component_id": str(books.tuition_component.id),
            "custom_amount": "12000",
            "reason": "Sibling discount",
        },
    )

    assert response.status_code == 200, response.text
    assert _asha_tuition(client, books)["amount_due"] == "12000.00"


def test_report_json_and_csv(client, books):
    rows = client.get(f"{API}/reports/agent-student").json()
    assert rows[0]["name"] == "Bright Futures"
    assert rows[0]["total_due"] == "34000.00"

    export = client.get(f"{API}/reports/agent-student/export")
    assert export.status_code == 200
    assert export.headers["content-type"].startswith("text/csv")
    assert export.headers["content-disposition"].startswith('attachment; filename="agent-student-')
    assert len(export.text.splitlines()) == 3


def test_empty_export_is_rejected(client, catalog):
    response = client.get(f"{API}/reports/due-payments/export")

    assert response.status_code == 422
    assert response.json()["error"]["message"] == "No data available to export"


def test_unknown_report_export(client):
    assert client.get(f"{API}/reports/balance-sheet/export").status_code == 404


def test_invoice_preview_and_create(client, catalog):
    payload = {
        "student_id": str(catalog.asha.id),
        "items": [{"description": "Hostel deposit", "amount": "1000"}],
        "discount": "10",
        "gst_percentage": "18",
    }

    preview = client.post(f"{API}/invoices/preview", json=payload)
    assert preview.status_code == 200
    assert preview.json()["total_amount"] == "1062.00"

    created = client.post(f"{API}/invoices", json=payload)
    assert created.status_code == 201
    assert created.json()["invoice_number"].startswith("INV-")

    marked = client.patch(f"{API}/invoices/{created.json()['id']}/status", json={"status": "Paid"})
    assert marked.json()["status"] == "Paid"


def test_numbering_endpoints(client, catalog):
    admission = client.post(f"{API}/numbering/admission", params={"year": 2024})
    assert admission.json()["number"] == "ADM20240004"

    receipt = client.post(f"{API}/numbering/receipt", json={"issue_date": "2024-06-01"})
    assert receipt.json()["number"] == "RCP202406010001"
