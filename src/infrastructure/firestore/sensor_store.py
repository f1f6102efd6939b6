"""Firestore implementation of the sensor repository."""

from google.cloud.firestore import AsyncClient

from domain.entities.sensor import Sensor


class FirestoreSensorStore:
    """Firestore implementation of ISensorRepository."""

    def __init__(self, db: AsyncClient, collection: str = "sensors") -> None:
        self._db = db
        self._collection = collection

    async def list_all(self) -> list[Sensor]:
        """Get all sensors in the collection."""
        out = []
        async for snap in self._db.collection(self._collection).stream():
            data = snap.to_dict() or {}
            out.append(Sensor(id=snap.id, name=data.get("name") or ""))
        return out

    async def get(self, sensor_id: str) -> Sensor | None:
        """Get a sensor by ID."""
        snap = await self._db.collection(self._collection).document(sensor_id).get()
        if not snap.exists:
            return None
        data = snap.to_dict() or {}
        return Sensor(id=snap.id, name=data.get("name") or "")

    async def delete(self, sensor_id: str) -> bool:
        """Delete a sensor document."""
        ref = self._db.collection(self._collection).document(sensor_id)
        snap = await ref.get()
        if not snap.exists:
            return False
        await ref.delete()
        return True
