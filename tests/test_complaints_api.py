# test_complaints_api.py
# 민원 API 테스트 (등록, 역할별 조회, 배정, 상태 변경, 메모)
import pytest

from accounts.models import Role
from complaints.models import Complaint

pytestmark = pytest.mark.django_db


def create_complaint(client, **overrides):
    payload = {'title': 'Router keeps rebooting', 'description': 'It restarts every ten minutes.'}
    payload.update(overrides)
    return client.post('/api/complaints', payload)


def test_customer_creates_and_retrieves_complaint(client_for, customer):
    client = client_for(customer)

    response = create_complaint(client)
    assert response.status_code == 201
    complaint = response.json()['complaint']
    assert complaint['status'] == 'open'
    assert complaint['category'] == 'general'
    assert complaint['priority'] == 'medium'
    assert complaint['assignedTo'] is None
    assert complaint['resolvedAt'] is None
    assert complaint['notes'] == []
    assert complaint['createdBy']['id'] == customer.pk

    detail = client.get(f"/api/complaints/{complaint['id']}")
    assert detail.status_code == 200
    assert detail.json()['complaint']['title'] == 'Router keeps rebooting'


def test_other_customer_cannot_retrieve(client_for, customer, other_customer):
    complaint_id = create_complaint(client_for(customer)).json()['complaint']['id']

    response = client_for(other_customer).get(f'/api/complaints/{complaint_id}')

    assert response.status_code == 403
    assert response.json() == {'message': 'Access denied'}


def test_retrieve_missing_complaint(client_for, admin_account):
    response = client_for(admin_account).get('/api/complaints/424242')

    assert response.status_code == 404
    assert response.json() == {'message': 'Complaint not found'}


@pytest.mark.parametrize('role', [Role.TECHNICIAN, Role.ADMIN])
def test_only_customers_create_complaints(client_for, make_account, role):
    response = create_complaint(client_for(make_account(role)))

    assert response.status_code == 403


def test_create_validates_lengths_and_enums(client_for, customer):
    client = client_for(customer)

    assert create_complaint(client, title='x' * 201).status_code == 400
    assert create_complaint(client, description='x' * 2001).status_code == 400
    assert create_complaint(client, category='plumbing').status_code == 400
    assert create_complaint(client, priority='critical').status_code == 400
    assert create_complaint(client, title='   ').status_code == 400
    assert Complaint.objects.count() == 0


def test_create_accepts_category_and_priority(client_for, customer):
    response = create_complaint(client_for(customer), category='billing', priority='urgent')

    complaint = response.json()['complaint']
    assert complaint['category'] == 'billing'
    assert complaint['priority'] == 'urgent'


def test_customer_list_never_shows_other_customers(client_for, customer, other_customer, make_complaint):
    mine = [make_complaint(customer, status=s, priority=p)
            for s, p in [('open', 'low'), ('resolved', 'high'), ('closed', 'urgent')]]
    for s, p in [('open', 'low'), ('resolved', 'high'), ('in-progress', 'medium')]:
        make_complaint(other_customer, status=s, priority=p)

    client = client_for(customer)
    mine_ids = {c.pk for c in mine}
    for params in [{}, {'status': 'all'}, {'status': 'open'}, {'status': 'resolved'},
                   {'priority': 'high'}, {'status': 'in-progress'}, {'status': 'all', 'priority': 'all'}]:
        body = client.get('/api/complaints', params).json()
        assert {c['id'] for c in body['complaints']} <= mine_ids
        assert all(c['createdBy']['id'] == customer.pk for c in body['complaints'])

    assert client.get('/api/complaints').json()['total'] == 3
    assert client.get('/api/complaints', {'status': 'in-progress'}).json()['total'] == 0


def test_technician_lists_only_assigned(client_for, customer, technician, other_technician, make_complaint):
    assigned = make_complaint(customer, assigned_to=technician)
    make_complaint(customer, assigned_to=other_technician)
    make_complaint(customer)

    body = client_for(technician).get('/api/complaints').json()

    assert [c['id'] for c in body['complaints']] == [assigned.pk]


def test_admin_lists_all_newest_first_with_pagination(client_for, admin_account, customer, make_complaint):
    complaints = [make_complaint(customer, title=f'Complaint {i}') for i in range(12)]

    client = client_for(admin_account)
    first = client.get('/api/complaints').json()
    assert first['total'] == 12
    assert first['totalPages'] == 2
    assert first['currentPage'] == 1
    assert len(first['complaints']) == 10
    assert first['complaints'][0]['id'] == complaints[-1].pk

    second = client.get('/api/complaints', {'page': 2}).json()
    assert [c['id'] for c in second['complaints']] == [complaints[1].pk, complaints[0].pk]

    beyond = client.get('/api/complaints', {'page': 5}).json()
    assert beyond['complaints'] == []


def test_list_filters_by_status_and_priority(client_for, admin_account, customer, make_complaint):
    target = make_complaint(customer, status='resolved', priority='high')
    make_complaint(customer, status='resolved', priority='low')
    make_complaint(customer, status='open', priority='high')

    body = client_for(admin_account).get('/api/complaints', {'status': 'resolved', 'priority': 'high'}).json()

    assert [c['id'] for c in body['complaints']] == [target.pk]


def test_assign_forces_in_progress_even_when_closed(client_for, admin_account, customer, technician, make_complaint):
    complaint = make_complaint(customer, status='closed')

    response = client_for(admin_account).put(f'/api/complaints/{complaint.pk}/assign', {'technicianId': technician.pk})

    assert response.status_code == 200
    body = response.json()['complaint']
    assert body['status'] == 'in-progress'
    assert body['assignedTo']['id'] == technician.pk
    complaint.refresh_from_db()
    assert complaint.status == Complaint.Status.IN_PROGRESS
    assert complaint.assigned_to == technician


def test_assign_requires_admin(client_for, customer, technician, make_complaint):
    complaint = make_complaint(customer, assigned_to=technician)

    response = client_for(technician).put(f'/api/complaints/{complaint.pk}/assign', {'technicianId': technician.pk})

    assert response.status_code == 403


def test_assign_missing_complaint_or_technician(client_for, admin_account, customer, technician, make_complaint):
    client = client_for(admin_account)
    complaint = make_complaint(customer)

    assert client.put('/api/complaints/999999/assign', {'technicianId': technician.pk}).status_code == 404
    assert client.put(f'/api/complaints/{complaint.pk}/assign', {'technicianId': 999999}).status_code == 404
    assert client.put(f'/api/complaints/{complaint.pk}/assign', {}).status_code == 404


def test_assign_rejects_non_technician_targets(client_for, admin_account, customer, make_account, make_complaint):
    client = client_for(admin_account)
    complaint = make_complaint(customer)
    inactive_technician = make_account(Role.TECHNICIAN, is_active=False)

    for target in (customer, admin_account, inactive_technician):
        response = client.put(f'/api/complaints/{complaint.pk}/assign', {'technicianId': target.pk})
        assert response.status_code == 400
        assert response.json() == {'message': 'Technician not found or inactive'}

    complaint.refresh_from_db()
    assert complaint.assigned_to is None
    assert complaint.status == Complaint.Status.OPEN


def test_unassigned_technician_cannot_update_or_note(client_for, customer, technician, other_technician, make_complaint):
    complaint = make_complaint(customer, assigned_to=other_technician, status='in-progress')
    client = client_for(technician)

    assert client.put(f'/api/complaints/{complaint.pk}/status', {'status': 'resolved'}).status_code == 403
    assert client.post(f'/api/complaints/{complaint.pk}/notes', {'content': 'hi'}).status_code == 403
    assert client.get(f'/api/complaints/{complaint.pk}').status_code == 403

    complaint.refresh_from_db()
    assert complaint.status == Complaint.Status.IN_PROGRESS
    assert complaint.notes.count() == 0


def test_technician_can_work_once_assigned(client_for, admin_account, customer, technician, make_complaint):
    complaint = make_complaint(customer)
    client = client_for(technician)

    assert client.put(f'/api/complaints/{complaint.pk}/status', {'status': 'resolved'}).status_code == 403

    client_for(admin_account).put(f'/api/complaints/{complaint.pk}/assign', {'technicianId': technician.pk})

    response = client.put(f'/api/complaints/{complaint.pk}/status', {'status': 'resolved'})
    assert response.status_code == 200
    assert response.json()['complaint']['status'] == 'resolved'

    response = client.post(f'/api/complaints/{complaint.pk}/notes', {'content': 'Replaced the router.'})
    assert response.status_code == 200
    note = response.json()['note']
    assert note['content'] == 'Replaced the router.'
    assert note['addedBy']['id'] == technician.pk
    assert note['addedAt']


def test_customers_cannot_update_status(client_for, customer, make_complaint):
    complaint = make_complaint(customer)

    response = client_for(customer).put(f'/api/complaints/{complaint.pk}/status', {'status': 'closed'})

    assert response.status_code == 403


def test_invalid_status_is_rejected_before_lookup(client_for, admin_account):
    response = client_for(admin_account).put('/api/complaints/999999/status', {'status': 'done'})

    assert response.status_code == 400
    assert response.json() == {'message': 'Invalid status'}


def test_status_update_missing_complaint(client_for, admin_account):
    response = client_for(admin_account).put('/api/complaints/999999/status', {'status': 'open'})

    assert response.status_code == 404


def test_resolution_timestamp_is_stamped_and_kept(client_for, admin_account, customer, make_complaint):
    complaint = make_complaint(customer)
    client = client_for(admin_account)
    url = f'/api/complaints/{complaint.pk}/status'

    resolved = client.put(url, {'status': 'resolved'}).json()['complaint']
    assert resolved['resolvedAt'] is not None

    reopened = client.put(url, {'status': 'open'}).json()['complaint']
    assert reopened['status'] == 'open'
    assert reopened['resolvedAt'] == resolved['resolvedAt']

    closed = client.put(url, {'status': 'closed'}).json()['complaint']
    assert closed['resolvedAt'] is not None


def test_notes_keep_insertion_order(client_for, admin_account, customer, make_complaint):
    complaint = make_complaint(customer)
    client = client_for(admin_account)

    for content in ('first', 'second', 'third'):
        assert client.post(f'/api/complaints/{complaint.pk}/notes', {'content': content}).status_code == 200

    notes = client_for(customer).get(f'/api/complaints/{complaint.pk}').json()['complaint']['notes']
    assert [n['content'] for n in notes] == ['first', 'second', 'third']


def test_note_content_is_validated(client_for, admin_account, customer, make_complaint):
    complaint = make_complaint(customer)
    client = client_for(admin_account)

    assert client.post(f'/api/complaints/{complaint.pk}/notes', {'content': 'x' * 1001}).status_code == 400
    assert client.post(f'/api/complaints/{complaint.pk}/notes', {}).status_code == 400
    assert client.post('/api/complaints/999999/notes', {'content': 'hello'}).status_code == 404
