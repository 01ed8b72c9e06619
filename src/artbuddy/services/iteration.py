"""IterationService — progress entries of one commission."""

from __future__ import annotations

from artbuddy.domain.errors import EntityNotFoundError
from artbuddy.domain.iteration import Iteration
from artbuddy.domain.values import Description, Feedback, ImagePath, IterationDate
from artbuddy.services._helpers import iteration_data
from artbuddy.services.base import USER_ERRORS, BaseService
from artbuddy.services.result import ServiceResult


class IterationService(BaseService):
    """Iteration operations on one commission of one customer."""

    def add_iteration(
        self,
        customer: str,
        commission: str,
        date: str,
        description: str,
        image_path: str,
        feedback: str,
    ) -> ServiceResult:
        op = "add_iteration"
        try:
            owner, target = self._find_commission(customer, commission)
            iteration = Iteration(
                date=IterationDate.parse(date.strip()),
                description=Description(description.strip()),
                image_path=ImagePath(image_path.strip()),
                feedback=Feedback(feedback.strip()),
            )
            with self._selected(owner, target):
                self._model.add_iteration(iteration)
        except USER_ERRORS as exc:
            return self._failure(op, exc, commission=commission.strip())
        data = iteration_data(iteration)
        data["commission"] = commission.strip()
        return ServiceResult(ok=True, op=op, data=data)

    def delete_iteration(
        self,
        customer: str,
        commission: str,
        date: str,
        description: str,
    ) -> ServiceResult:
        """Delete the iteration identified by *date* and *description*."""
        op = "delete_iteration"
        try:
            owner, opened = self._find_commission(customer, commission)
            when = IterationDate.parse(date.strip())
            what = Description(description.strip())
            target = next(
                (i for i in opened.iterations if i.date == when and i.description == what),
                None,
            )
            if target is None:
                raise EntityNotFoundError(f"{when} {what}", kind="iteration")
            with self._selected(owner, opened):
                self._model.delete_iteration(target)
        except USER_ERRORS as exc:
            return self._failure(op, exc, commission=commission.strip())
        data = iteration_data(target)
        data["commission"] = commission.strip()
        return ServiceResult(ok=True, op=op, data=data)

    def list_iterations(self, customer: str, commission: str) -> ServiceResult:
        op = "list_iterations"
        try:
            _, opened = self._find_commission(customer, commission)
        except USER_ERRORS as exc:
            return self._failure(op, exc)
        items = [iteration_data(i) for i in opened.iterations]
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})
