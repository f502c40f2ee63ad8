"""
Integration tests for the HealHub pages.

These tests walk the public pages, the role-gated admin pages and the
not-found handling through Django REST framework's APIClient within
the APITestCase base class.

To run the tests:

```
pytest -q portal/tests
```
"""

from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APITestCase

from ..models import Doctor, Enquiry, HospitalContact
from ..services.roles import set_admin

PASSWORD = 'Str0ng-Passw0rd!'


class PortalPageTests(APITestCase):
    def setUp(self) -> None:
        """Create doctors, an admin, a regular user and a few enquiries."""
        User = get_user_model()
        self.cardio1 = Doctor.objects.create(name='Dr. Sarah Johnson', specialty='Cardiology', rating=4.9,
                                             review_count=124, experience=15)
        self.cardio2 = Doctor.objects.create(name='Dr. James Rodriguez', specialty='cardiology', rating=4.8,
                                             review_count=114, experience=17)
        self.neuro = Doctor.objects.create(name='Dr. Michael Chen', specialty='Neurology', rating=4.8,
                                           review_count=98, experience=12)
        self.derm = Doctor.objects.create(name='Dr. Emily Wilson', specialty='Dermatology', rating=4.5,
                                          review_count=102, experience=8)

        self.admin = User.objects.create_user(username='admin@example.com', email='admin@example.com',
                                              password=PASSWORD, first_name='Ada')
        set_admin(self.admin, True)
        self.member = User.objects.create_user(username='member@example.com', email='member@example.com',
                                               password=PASSWORD, first_name='Meg')
        set_admin(self.member, False)

        for i in range(7):
            Enquiry.objects.create(name=f'Person {i}', email=f'p{i}@example.com',
                                   message='A question about visiting hours.')

    def sign_in(self, email: str) -> None:
        r = self.client.post('/api/auth/sign-in', {'email': email, 'password': PASSWORD}, format='json')
        self.assertEqual(r.status_code, status.HTTP_200_OK)

    # ------------------------------------------------------------------
    # Public pages
    # ------------------------------------------------------------------
    def test_home_features_top_rated_doctors(self) -> None:
        r = self.client.get('/')
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        data = r.data['data']
        self.assertEqual(len(data['services']), 6)
        self.assertEqual([d['name'] for d in data['featuredDoctors']],
                         ['Dr. Sarah Johnson', 'Dr. James Rodriguez', 'Dr. Michael Chen'])
        self.assertEqual(data['notifications'], [])

    def test_doctors_page_lists_specialties(self) -> None:
        r = self.client.get('/doctors')
        data = r.data['data']
        self.assertEqual(data['specialties'][0], 'all')
        self.assertEqual(len(data['doctors']), 4)
        self.assertIn('Neurology', data['specialties'])

    def test_doctor_search_api(self) -> None:
        r = self.client.get('/api/doctors', {'specialty': 'CARDIOLOGY'})
        self.assertEqual({d['name'] for d in r.data['data']}, {'Dr. Sarah Johnson', 'Dr. James Rodriguez'})
        r = self.client.get('/api/doctors', {'q': 'chen'})
        self.assertEqual([d['name'] for d in r.data['data']], ['Dr. Michael Chen'])

    def test_doctor_profile_and_missing_doctor(self) -> None:
        r = self.client.get(f'/doctor/{self.neuro.id}')
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertIn('12 years of experience', r.data['data']['doctor']['about'])

        r = self.client.get('/doctor/00000000-0000-0000-0000-000000000000')
        self.assertEqual(r.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(r.data['data']['link']['link'], '/doctors')

        r = self.client.get('/api/doctors/not-a-uuid')
        self.assertEqual(r.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(r.data['error']['code'], 'not_found')

    def test_services_page_tabs(self) -> None:
        r = self.client.get('/services')
        tabs = {t['value']: t for t in r.data['data']['specialists']}
        self.assertEqual(list(tabs), ['all', 'cardiology', 'neurology', 'orthopedics'])
        self.assertEqual(len(tabs['all']['doctors']), 3)
        self.assertTrue(tabs['all']['hasMore'])
        self.assertEqual(len(tabs['cardiology']['doctors']), 2)
        self.assertFalse(tabs['cardiology']['hasMore'])
        self.assertEqual(tabs['orthopedics']['doctors'], [])

    def test_service_detail_matches_specialty_ignoring_case(self) -> None:
        r = self.client.get('/services/cardiology')
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertEqual(r.data['data']['service']['title'], 'Cardiology')
        self.assertEqual(len(r.data['data']['service']['features']), 4)
        self.assertEqual(len(r.data['data']['doctors']), 2)

        r = self.client.get('/services/astrology')
        self.assertEqual(r.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(r.data['data']['title'], 'Service Not Found')

    def test_contact_page_empty_state(self) -> None:
        r = self.client.get('/contact')
        self.assertTrue(r.data['data']['emptyMessage'])
        HospitalContact.objects.create(name='Main Reception', phone='+1 555 0100', email='info@example.com')
        # contacts stay fresh for an hour
        r = self.client.get('/api/contacts')
        self.assertEqual(r.data['data'], [])

    def test_unknown_path_is_not_found(self) -> None:
        r = self.client.get('/no/such/page')
        self.assertEqual(r.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(r.data['data']['title'], 'Page not found')
        self.assertEqual(r.data['data']['link']['link'], '/')

    # ------------------------------------------------------------------
    # Role-gated pages
    # ------------------------------------------------------------------
    def test_anonymous_admin_visit_redirects_home_with_notice(self) -> None:
        r = self.client.get('/admin')
        self.assertEqual(r.status_code, status.HTTP_302_FOUND)
        self.assertEqual(r['Location'], '/')
        self.assertFalse(hasattr(r, 'data') and r.data)

        home = self.client.get('/')
        self.assertEqual(len(home.data['data']['notifications']), 1)
        # notices are shown once
        again = self.client.get('/')
        self.assertEqual(again.data['data']['notifications'], [])

    def test_non_admin_cannot_open_admin_pages(self) -> None:
        self.sign_in('member@example.com')
        for path in ('/admin', '/admin/enquiries'):
            r = self.client.get(path)
            self.assertEqual(r.status_code, status.HTTP_302_FOUND, path)
            self.assertEqual(r['Location'], '/')

    def test_admin_dashboard(self) -> None:
        self.sign_in('admin@example.com')
        r = self.client.get('/admin')
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        data = r.data['data']
        stats = {s['label']: s['value'] for s in data['stats']}
        self.assertEqual(stats['Total Doctors'], 4)
        self.assertEqual(stats['Enquiries'], 7)
        self.assertEqual(stats['Appointments'], 0)
        self.assertEqual(stats['Patients'], 0)
        self.assertEqual(len(data['recentEnquiries']), 5)
        by_specialty = data['charts']['doctorsBySpecialty']
        self.assertEqual(by_specialty[0], {'name': 'Dermatology', 'value': 1})
        self.assertEqual(sum(p['value'] for p in by_specialty), 4)
        self.assertEqual(data['charts']['appointmentsByDate'], [])

    def test_admin_enquiries_page(self) -> None:
        self.sign_in('admin@example.com')
        r = self.client.get('/admin/enquiries')
        self.assertEqual(r.status_code, status.HTTP_200_OK)
        self.assertEqual(len(r.data['data']['enquiries']), 7)
        self.assertEqual([o['label'] for o in r.data['data']['statusOptions']], ['New', 'In Progress', 'Completed'])
