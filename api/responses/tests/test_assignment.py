from django.test import SimpleTestCase

from responses import assignment
from responses.assignment import SectionState
from responses.errors import (
    AlreadyLockedError,
    ManagerRequiredError,
    SectionLockedError,
    SectionNotAssignedError,
)
from team.actor import Actor

PM_A = Actor(id='pm-a', is_manager=True)
PM_B = Actor(id='pm-b', is_manager=True)
WRITER = Actor(id='writer', is_manager=False)
OTHER = Actor(id='other', is_manager=False)


class AssignTests(SimpleTestCase):
    def test_assign_and_unassign(self):
        state = assignment.assign(SectionState(), 'writer', WRITER)
        self.assertEqual(state.assigned_to, 'writer')
        self.assertEqual(state.phase, 'assigned')
        self.assertEqual(assignment.unassign(state, WRITER).phase, 'unassigned')

    def test_non_manager_cannot_assign_locked(self):
        locked = assignment.lock(SectionState(assigned_to='writer'), PM_A)
        with self.assertRaises(SectionLockedError):
            assignment.assign(locked, 'other', WRITER)
        with self.assertRaises(SectionLockedError):
            assignment.unassign(locked, WRITER)

    def test_manager_reassigns_locked_section_lock_kept(self):
        locked = assignment.lock(SectionState(assigned_to='writer'), PM_A)
        state = assignment.assign(locked, 'other', PM_B)
        self.assertEqual(state.assigned_to, 'other')
        self.assertTrue(state.locked)
        self.assertEqual(state.locked_by, 'pm-a')


class LockTests(SimpleTestCase):
    def test_lock_requires_manager(self):
        with self.assertRaises(ManagerRequiredError):
            assignment.lock(SectionState(), WRITER)
        with self.assertRaises(ManagerRequiredError):
            assignment.unlock(SectionState(locked=True, locked_by='pm-a'), WRITER)

    def test_relock_by_holder_is_noop(self):
        locked = assignment.lock(SectionState(), PM_A)
        self.assertEqual(assignment.lock(locked, PM_A), locked)

    def test_lock_by_other_manager_conflicts(self):
        locked = assignment.lock(SectionState(), PM_A)
        with self.assertRaises(AlreadyLockedError):
            assignment.lock(locked, PM_B)

    def test_holderless_lock_is_claimed(self):
        state = assignment.lock(SectionState(locked=True), PM_B)
        self.assertEqual(state.locked_by, 'pm-b')

    def test_any_manager_unlocks(self):
        locked = assignment.lock(SectionState(assigned_to='writer'), PM_A)
        state = assignment.unlock(locked, PM_B)
        self.assertFalse(state.locked)
        self.assertIsNone(state.locked_by)
        self.assertEqual(state.assigned_to, 'writer')


class CanEditTests(SimpleTestCase):
    def test_assignee_loses_edit_when_locked(self):
        state = SectionState(assigned_to='writer')
        self.assertTrue(assignment.can_edit(state, WRITER))
        locked = assignment.lock(state, PM_A)
        self.assertFalse(assignment.can_edit(locked, WRITER))
        self.assertEqual(locked.assigned_to, 'writer')

    def test_other_and_anonymous_cannot_edit(self):
        state = SectionState(assigned_to='writer')
        self.assertFalse(assignment.can_edit(state, OTHER))
        self.assertFalse(assignment.can_edit(state, None))

    def test_manager_can_always_edit(self):
        self.assertTrue(assignment.can_edit(SectionState(locked=True, locked_by='pm-b'), PM_A))

    def test_ensure_can_edit_errors(self):
        with self.assertRaises(SectionLockedError):
            assignment.ensure_can_edit(SectionState(assigned_to='writer', locked=True), WRITER)
        with self.assertRaises(SectionNotAssignedError):
            assignment.ensure_can_edit(SectionState(assigned_to='writer'), OTHER)
