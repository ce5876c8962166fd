from django.core.management.base import BaseCommand, CommandError

from accounts.seed import load_demo_accounts, seed_accounts


class Command(BaseCommand):
    help = '데모 계정(관리자, 기술자, 고객)을 픽스처 파일에서 생성합니다.'

    def add_arguments(self, parser):
        parser.add_argument('--fixture', help='계정 픽스처 JSON 파일 경로')
        parser.add_argument('--password', help='모든 계정에 사용할 비밀번호 (픽스처 값 대신)')

    def handle(self, *args, **options):
        try:
            entries = load_demo_accounts(options.get('fixture'))
        except (OSError, ValueError) as e:
            raise CommandError(f"픽스처를 읽을 수 없습니다: {e}")

        created, skipped = seed_accounts(entries, password=options.get('password'))

        for account in created:
            self.stdout.write(self.style.SUCCESS(f"생성: {account.email} ({account.role})"))
        for email in skipped:
            self.stdout.write(f"건너뜀: {email} (이미 존재)")
