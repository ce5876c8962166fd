from django.db import models, IntegrityError, transaction
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager

from complaint_backend.exceptions import Conflict, InvalidArgument, InvalidCredentials


class Role(models.TextChoices):
    CUSTOMER = 'customer', 'Customer'
    TECHNICIAN = 'technician', 'Technician'
    ADMIN = 'admin', 'Admin'


# 관리자가 직접 생성할 수 있는 역할
STAFF_ROLES = (Role.TECHNICIAN, Role.ADMIN)


class AccountQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def technicians(self):
        return self.active().filter(role=Role.TECHNICIAN)

    def with_role(self, role):
        # 'all' 또는 빈 값은 필터 없음
        if not role or role == 'all':
            return self
        return self.filter(role=role)


# 계정 생성, 인증 등 계정 디렉터리 역할을 하는 매니저
class AccountManager(BaseUserManager.from_queryset(AccountQuerySet)):
    use_in_migrations = True

    def normalize_email(self, email):
        return super().normalize_email(email or '').strip().lower()

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('이메일은 필수입니다.')
        email = self.normalize_email(email)
        account = self.model(email=email, **extra_fields)
        account.set_password(password)  # 비밀번호 해싱
        account.save(using=self._db)
        return account

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('role', Role.ADMIN)
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        return self.create_user(email, password, **extra_fields)

    def email_taken(self, email):
        return self.filter(email__iexact=self.normalize_email(email)).exists()

    def _create_unique(self, name, email, password, role):
        if self.email_taken(email):
            raise Conflict('User already exists with this email')
        try:
            with transaction.atomic():
                return self.create_user(email, password, name=name, role=role)
        except IntegrityError:
            # 동시에 같은 이메일로 가입한 경우
            raise Conflict('User already exists with this email')

    def register(self, name, email, password):
        """고객 계정 회원가입"""
        return self._create_unique(name, email, password, Role.CUSTOMER)

    def create_staff(self, name, email, password, role):
        """관리자가 기술자/관리자 계정을 생성"""
        if role not in STAFF_ROLES:
            raise InvalidArgument('Invalid role. Can only create technician or admin users.')
        return self._create_unique(name, email, password, role)

    def authenticate_credentials(self, email, password):
        """
        이메일과 비밀번호로 계정을 확인한다.
        계정이 없으면 타이밍 차이를 줄이기 위해 해시를 한 번 계산한다.
        """
        account = self.filter(email__iexact=self.normalize_email(email)).first()
        if account is None:
            self.model().set_password(password)
            raise InvalidCredentials('Invalid email or password')
        if not account.check_password(password):
            raise InvalidCredentials('Invalid email or password')
        if not account.is_active:
            raise InvalidCredentials('Account is deactivated')
        return account


class Account(AbstractBaseUser):
    name = models.CharField(max_length=100)
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.CUSTOMER)
    created_at = models.DateTimeField(auto_now_add=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    is_superuser = models.BooleanField(default=False)

    objects = AccountManager()

    USERNAME_FIELD = 'email'  # 사용자 인증에 사용되는 필드
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']  # 슈퍼유저 생성 시 필수 필드

    class Meta:
        ordering = ['-created_at', '-id']

    @property
    def is_customer(self):
        return self.role == Role.CUSTOMER

    @property
    def is_technician(self):
        return self.role == Role.TECHNICIAN

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    def toggle_active(self):
        """활성/비활성 상태 전환"""
        self.is_active = not self.is_active
        self.save(update_fields=['is_active'])
        return self.is_active

    # Django admin 사이트 접근용
    def has_perm(self, perm, obj=None):
        return self.is_active and self.is_superuser

    def has_module_perms(self, app_label):
        return self.is_active and self.is_superuser

    def __str__(self):
        return f"{self.name} <{self.email}>"
