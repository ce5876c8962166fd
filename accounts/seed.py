# seed.py
# 데모/테스트용 계정 데이터 로딩 (JSON 픽스처 기반)
import json
import logging
import os

from .models import Account, Role

logger = logging.getLogger('complaints')

DEFAULT_FIXTURE_PATH = os.path.join(os.path.dirname(__file__), 'fixtures', 'demo_accounts.json')


def load_demo_accounts(path=None):
    """픽스처 파일에서 계정 목록을 읽는다. 각 항목은 name, email, password, role 을 가진다."""
    with open(path or DEFAULT_FIXTURE_PATH, encoding='utf-8') as f:
        entries = json.load(f)

    for entry in entries:
        missing = {'name', 'email', 'password', 'role'} - set(entry)
        if missing:
            raise ValueError(f"픽스처 항목에 필드가 없습니다: {', '.join(sorted(missing))}")
        if entry['role'] not in Role.values:
            raise ValueError(f"알 수 없는 역할입니다: {entry['role']}")
    return entries


def seed_accounts(entries, password=None):
    """
    계정 목록을 계정 디렉터리에 등록한다. 이미 있는 이메일은 건너뛴다.
    (생성된 계정 목록, 건너뛴 이메일 목록) 을 반환한다.
    """
    created, skipped = [], []
    for entry in entries:
        if Account.objects.email_taken(entry['email']):
            skipped.append(entry['email'])
            continue

        entry_password = password or entry['password']
        if entry['role'] == Role.CUSTOMER:
            account = Account.objects.register(entry['name'], entry['email'], entry_password)
        else:
            account = Account.objects.create_staff(entry['name'], entry['email'], entry_password, entry['role'])
        created.append(account)
        logger.info(f"Seeded {account.role} account {account.email}")
    return created, skipped
